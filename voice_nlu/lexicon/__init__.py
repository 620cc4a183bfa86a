"""
Lexicon Store
=============

Static vocabulary for every supported language variant, plus the compiled
matchers derived from it.

Each language lives in its own module (english, french, german, italian)
exposing the same set of upper-case tables. ``load_tables`` resolves a variant id to one
immutable ``LexiconTables`` snapshot, and ``compile_matchers`` turns that
snapshot into the ``PhraseMatcher`` objects the pipeline runs. Compilation
cost is proportional to the vocabulary size and happens once per variant
switch, never per transcript.

Supported variants:
-------------------
- en-US, en-GB
- fr-FR, fr-CH
- de-DE, de-AT, de-BY, de-CH
- it-IT, it-CH

Usage:
------
    from voice_nlu.lexicon import load_tables, compile_matchers

    tables = load_tables("fr-CH")
    matchers = compile_matchers(tables)
    text, changes = matchers.dialect.substitute("chuis là")
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Pattern, Tuple

from ..exceptions import UnsupportedVariantError
from ..matching import PhraseMatcher
from . import english, french, german, italian

logger = logging.getLogger(__name__)


# Language modules in registration order; variants are listed per module.
LANGUAGE_MODULES = {
    english.LANGUAGE: english,
    french.LANGUAGE: french,
    german.LANGUAGE: german,
    italian.LANGUAGE: italian,
}

FOOD_CATEGORIES = (
    "beverage", "dessert", "appetizer", "meat", "seafood", "main_course", "side", "other",
)


# =============================================================================
# Table Types
# =============================================================================

@dataclass(frozen=True)
class LexiconEntry:
    """One source -> canonical mapping. ``category`` is set for food entries."""

    source_term: str
    canonical_term: str
    category: Optional[str] = None


@dataclass(frozen=True)
class IntentPattern:
    """Trigger phrases for one intent of the fixed taxonomy."""

    intent: str
    label: str
    trigger_phrases: Tuple[str, ...]


@dataclass(frozen=True)
class LexiconTables:
    """Immutable vocabulary snapshot for one language variant."""

    variant: str
    language: str
    abbreviations: Tuple[Tuple[Pattern, str], ...]
    dialect: Tuple[LexiconEntry, ...]
    slang: Tuple[LexiconEntry, ...]
    food: Tuple[LexiconEntry, ...]
    common: Tuple[LexiconEntry, ...]
    phonetic: Tuple[LexiconEntry, ...]
    intents: Tuple[IntentPattern, ...]
    structure_words: FrozenSet[str]
    confidence_divisor: int
    number_units: Mapping[str, int]
    number_multipliers: Mapping[str, int]
    number_articles: Mapping[str, bool]
    article_nouns: FrozenSet[str]
    number_connectors: Mapping[str, Mapping]
    compound_teens: bool
    numeral_idioms: Tuple[str, ...]
    modifiers: Tuple[str, ...]
    sizes: Tuple[str, ...]
    cooking_methods: Tuple[str, ...]
    proper_nouns: Tuple[str, ...]

    def food_mapping(self) -> Dict[str, str]:
        return {entry.source_term: entry.canonical_term for entry in self.food}


@dataclass(frozen=True)
class LexiconMatchers:
    """Matchers compiled from one ``LexiconTables`` snapshot."""

    dialect: PhraseMatcher
    slang: PhraseMatcher
    food: PhraseMatcher
    common: PhraseMatcher
    phonetic: PhraseMatcher
    proper_nouns: PhraseMatcher
    food_categories: Mapping[str, str]


# =============================================================================
# Variant Registry
# =============================================================================

def supported_variants() -> List[str]:
    """All variant ids, grouped by language in registration order."""
    variants = []
    for module in LANGUAGE_MODULES.values():
        variants.extend(module.REGIONAL_MAPPINGS)
    return variants


def resolve_variant(variant) -> str:
    """
    Map a user-supplied variant id to its registered spelling.

    Matching ignores case and accepts "_" for "-" ("fr_ch" -> "fr-CH").

    Raises:
        UnsupportedVariantError: The id is not a registered variant.
    """
    if not isinstance(variant, str) or not variant.strip():
        raise UnsupportedVariantError(variant)
    wanted = variant.strip().replace("_", "-").lower()
    for known in supported_variants():
        if known.lower() == wanted:
            return known
    raise UnsupportedVariantError(variant)


def language_of(variant: str) -> str:
    return resolve_variant(variant).split("-", 1)[0]


def default_variant_for(language: str) -> Optional[str]:
    module = LANGUAGE_MODULES.get(language)
    return module.DEFAULT_VARIANT if module else None


def language_module(language: str):
    return LANGUAGE_MODULES[language]


# =============================================================================
# Food Categories
# =============================================================================

def categorize_food(canonical_name: str, language: str) -> str:
    """
    Derive the category of a canonical food name.

    Explicit overrides win; otherwise the first category whose keyword is a
    substring of the space-padded name is used, falling back to "other".
    """
    module = LANGUAGE_MODULES[language]
    name = canonical_name.lower()
    if name in module.FOOD_CATEGORY_OVERRIDES:
        return module.FOOD_CATEGORY_OVERRIDES[name]
    padded = f" {name} "
    for category, keywords in module.FOOD_CATEGORY_KEYWORDS:
        if any(keyword in padded for keyword in keywords):
            return category
    return "other"


# =============================================================================
# Loading & Compilation
# =============================================================================

def _entries(mapping: Mapping[str, str], language: Optional[str] = None) -> Tuple[LexiconEntry, ...]:
    return tuple(
        LexiconEntry(
            source,
            canonical,
            categorize_food(canonical, language) if language else None,
        )
        for source, canonical in mapping.items()
    )


def load_tables(variant: str) -> LexiconTables:
    """
    Load the static tables for a variant, built once per variant.

    Raises:
        UnsupportedVariantError: The variant is not registered.
    """
    return _build_tables(resolve_variant(variant))


@lru_cache(maxsize=None)
def _build_tables(variant: str) -> LexiconTables:
    language = variant.split("-", 1)[0]
    module = LANGUAGE_MODULES[language]

    intents = tuple(
        IntentPattern(intent, label, tuple(phrases))
        for intent, (label, phrases) in module.INTENT_TRIGGERS.items()
    )
    abbreviations = tuple(
        (re.compile(pattern), replacement) for pattern, replacement in module.ABBREVIATIONS
    )

    tables = LexiconTables(
        variant=variant,
        language=language,
        abbreviations=abbreviations,
        dialect=_entries(module.REGIONAL_MAPPINGS[variant]),
        slang=_entries(module.SLANG_TERMS),
        food=_entries(module.FOOD_TERMS, language),
        common=_entries(module.COMMON_WORDS),
        phonetic=_entries(module.PHONETIC_REPLACEMENTS),
        intents=intents,
        structure_words=frozenset(module.STRUCTURE_WORDS),
        confidence_divisor=module.CONFIDENCE_LENGTH_DIVISOR,
        number_units=MappingProxyType(dict(module.NUMBER_UNITS)),
        number_multipliers=MappingProxyType(dict(module.NUMBER_MULTIPLIERS)),
        number_articles=MappingProxyType(dict(module.NUMBER_ARTICLES)),
        article_nouns=frozenset(module.ARTICLE_NOUNS),
        number_connectors=MappingProxyType(dict(module.NUMBER_CONNECTORS)),
        compound_teens=module.COMPOUND_TEENS,
        numeral_idioms=tuple(module.NUMERAL_IDIOMS),
        modifiers=tuple(module.MODIFIERS),
        sizes=tuple(module.SIZES),
        cooking_methods=tuple(module.COOKING_METHODS),
        proper_nouns=tuple(module.PROPER_NOUNS),
    )
    logger.debug(
        "Loaded lexicon %s: %d dialect, %d food, %d phonetic entries",
        variant, len(tables.dialect), len(tables.food), len(tables.phonetic),
    )
    return tables


def _mapping(entries: Tuple[LexiconEntry, ...]) -> Dict[str, str]:
    return {entry.source_term: entry.canonical_term for entry in entries}


def compile_matchers(tables: LexiconTables) -> LexiconMatchers:
    """Compile every lookup table of a variant into its matcher."""
    food_categories = {entry.canonical_term.lower(): entry.category for entry in tables.food}
    return LexiconMatchers(
        dialect=PhraseMatcher(_mapping(tables.dialect)),
        slang=PhraseMatcher(_mapping(tables.slang)),
        food=PhraseMatcher(_mapping(tables.food)),
        common=PhraseMatcher(_mapping(tables.common)),
        phonetic=PhraseMatcher(_mapping(tables.phonetic), whole_word=False),
        proper_nouns=PhraseMatcher(
            {name.lower(): name for name in tables.proper_nouns}, protect_targets=False
        ),
        food_categories=MappingProxyType(food_categories),
    )


__all__ = [
    "FOOD_CATEGORIES",
    "IntentPattern",
    "LANGUAGE_MODULES",
    "LexiconEntry",
    "LexiconMatchers",
    "LexiconTables",
    "categorize_food",
    "compile_matchers",
    "default_variant_for",
    "language_module",
    "language_of",
    "load_tables",
    "resolve_variant",
    "supported_variants",
]
