"""
Normalization Pipeline
======================

Turns a raw speech-to-text transcript into canonical text by running a fixed
sequence of stages over the compiled state of one language variant.

Stage Order:
------------
1.  normalize: lower-case, unify apostrophes, expand abbreviations, run the
    grammar stage's normalization sub-step, strip sentence punctuation
2.  regional dialect mapping (enable_regional_dialects)
3.  slang correction (handle_slang; only English has a slang table)
4.  food-term mapping, only inside a restaurant or food context
5.  common restaurant vocabulary
6.  phonetic corrections, matched inside words
7.  grammar correction (each rule set behind its own toggle)
8.  compound constructions ("w/o" -> "without", "pommes rot-weiß")
9.  vocabulary boost overrides
10. numeral conversion
11. cleanup: whitespace, display casing, first letter upper-cased

The pipeline never mutates engine state. ``process`` returns the canonical
text together with a PipelineTrace; the engine folds the trace into its
statistics under its own lock.

Compiled State:
---------------
Everything derived from a variant's tables (matchers, grammar stage, numeral
converter, intent classifier, entity extractor) is built by
``compile_variant`` into one frozen CompiledVariant. Switching variants
replaces that single object, so no call can observe a half-updated set of
matchers.
"""

import logging
import re
from dataclasses import dataclass
from typing import Tuple

from .entities import EntityExtractor
from .grammar import GrammarStage, StageResult, grammar_for
from .intent import IntentClassifier
from .lexicon import LexiconMatchers, LexiconTables, compile_matchers, load_tables
from .numerals import NumeralConverter
from .statistics import PipelineTrace
from .vocabulary import VocabularyBoostStore

logger = logging.getLogger(__name__)


_APOSTROPHES = re.compile(r"[‘’ʼ`´]")
_WHITESPACE = re.compile(r"\s+")
# Sentence punctuation at the end of a word; "3.50" and "w/o" survive
_TRAILING_PUNCTUATION = re.compile(r"[.,!?;:…]+(?=\s|$)")
_BRACKETS_AND_QUOTES = re.compile(r"[\"“”„«»()\[\]{}¿¡]")


@dataclass(frozen=True)
class CompiledVariant:
    variant: str
    language: str
    tables: LexiconTables
    matchers: LexiconMatchers
    grammar: GrammarStage
    numerals: NumeralConverter
    classifier: IntentClassifier
    extractor: EntityExtractor


def compile_variant(variant: str) -> CompiledVariant:
    """
    Build every matcher for a variant.

    Raises:
        UnsupportedVariantError: The variant is not registered.
    """
    tables = load_tables(variant)
    matchers = compile_matchers(tables)
    compiled = CompiledVariant(
        variant=tables.variant,
        language=tables.language,
        tables=tables,
        matchers=matchers,
        grammar=grammar_for(tables.language),
        numerals=NumeralConverter(tables),
        classifier=IntentClassifier(tables, matchers),
        extractor=EntityExtractor(tables, matchers),
    )
    logger.info("Compiled language variant %s", compiled.variant)
    return compiled


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def normalize(compiled: CompiledVariant, raw, options) -> Tuple[str, StageResult]:
    """
    Stage 1. Returns the normalized text and the corrections made by the
    grammar sub-step. Non-string or blank input yields "".
    """
    if not isinstance(raw, str):
        return "", StageResult("")
    text = _collapse(_APOSTROPHES.sub("'", raw.lower()))
    if not text:
        return "", StageResult("")

    for pattern, replacement in compiled.tables.abbreviations:
        text = pattern.sub(replacement, text)

    result = compiled.grammar.normalize_forms(text, options)
    text = _BRACKETS_AND_QUOTES.sub(" ", result.text)
    text = _collapse(_TRAILING_PUNCTUATION.sub("", text))
    return text, result._replace(text=text)


def process(
    compiled: CompiledVariant,
    raw,
    options,
    context_active: bool,
    boosts: VocabularyBoostStore,
) -> Tuple[str, str, PipelineTrace]:
    """
    Run every stage over one transcript.

    Returns:
        (canonical_text, normalized_text, trace)
    """
    normalized, corrections = normalize(compiled, raw, options)
    trace = PipelineTrace(
        grammar_corrections=corrections.grammar,
        slang_or_liaison_corrections=corrections.liaison,
    )
    if not normalized:
        return "", "", trace

    matchers = compiled.matchers
    text = normalized

    if options.enable_regional_dialects:
        text, trace.dialect_words_found = matchers.dialect.substitute(text)

    if options.handle_slang:
        text, changes = matchers.slang.substitute(text)
        trace.slang_or_liaison_corrections += changes

    if context_active:
        text, trace.context_matches = matchers.food.substitute(text)

    text, _ = matchers.common.substitute(text)
    text, _ = matchers.phonetic.substitute(text)

    result = compiled.grammar.correct_grammar(text, options)
    text = result.text
    trace.grammar_corrections += result.grammar
    trace.slang_or_liaison_corrections += result.liaison

    result = compiled.grammar.normalize_constructions(text)
    text = result.text
    trace.grammar_corrections += result.grammar

    text, trace.confidence_boosts = boosts.substitute(text, include_context=context_active)

    text = compiled.numerals.convert(text)

    if text.lower() != normalized.lower():
        trace.replacements_made = 1

    text = _collapse(text)
    text = compiled.grammar.capitalize(text, matchers.proper_nouns)
    if text:
        text = text[0].upper() + text[1:]
    return text, normalized, trace


def prepare_for_extraction(compiled: CompiledVariant, raw, options) -> str:
    """Normalized and numeral-converted text used for entity extraction."""
    normalized, _ = normalize(compiled, raw, options)
    return compiled.numerals.convert(normalized) if normalized else ""
