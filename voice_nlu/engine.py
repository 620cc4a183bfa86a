"""
Utterance Engine
================

The public entry point of voice_nlu. One UtteranceEngine owns everything a
conversation needs: the compiled state of its language variant, its
vocabulary boost store, its conversation context and its statistics. Nothing
is shared between instances, so hosts can run one engine per session.

Thread Safety:
--------------
Every public method holds the engine's re-entrant lock while it reads or
mutates state. Variant switches, vocabulary changes and configuration imports
are therefore mutually exclusive with in-flight process_transcript calls.
Compiled state is swapped by a single reference assignment.

Failure Semantics:
------------------
- Conversion calls (process_transcript, normalize_text, classify_intent,
  extract_entities) never raise on empty, None or non-string input.
- set_variant with an unsupported id returns False and changes nothing.
- import_configuration builds the complete new state before touching the
  live one; any failure returns False and leaves the engine untouched.

Usage:
------
    from voice_nlu import initialize

    engine = initialize("en-US")
    engine.process_transcript("I'd like a cheeseburger and fries please")
    # "I would like a cheeseburger and french fries please"
    engine.classify_intent("can i get a coke").intent
    # "order"
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from .config import DEFAULT_BOOST_CONFIDENCE, DEFAULT_VARIANT
from .exceptions import ConfigurationImportError, UnsupportedVariantError
from .lexicon import default_variant_for, resolve_variant, supported_variants
from .pipeline import CompiledVariant, compile_variant, normalize, prepare_for_extraction, process
from .schemas.configuration import (
    ConversationContext,
    EngineConfiguration,
    EngineOptions,
    VocabularyBoostEntry,
)
from .schemas.results import ClassificationResult, EntityBag
from .statistics import StatisticsCollector
from .vocabulary import VocabularyBoostStore

logger = logging.getLogger(__name__)


def _fallback_variant(variant) -> str:
    """Language default for an unknown regional id, else the global default."""
    if isinstance(variant, str):
        language = variant.strip().replace("_", "-").split("-", 1)[0].lower()
        fallback = default_variant_for(language)
        if fallback:
            return fallback
    return resolve_variant(DEFAULT_VARIANT)


def _parse_context(context) -> Optional[ConversationContext]:
    if isinstance(context, ConversationContext):
        return context
    if isinstance(context, str):
        try:
            return ConversationContext(context.strip().lower())
        except ValueError:
            return None
    return None


class UtteranceEngine:
    """
    Per-language utterance normalization and intent/entity extraction.

    Args:
        variant: Language variant id ("en-US", "fr-CH", ...)
        options: Behaviour toggles; defaults to EngineOptions()

    Raises:
        UnsupportedVariantError: Unknown variant with options.strict_mode set.
    """

    def __init__(self, variant: str = DEFAULT_VARIANT, options: EngineOptions = None):
        self._lock = threading.RLock()
        self._options = options or EngineOptions()
        try:
            compiled = compile_variant(variant)
        except UnsupportedVariantError:
            if self._options.strict_mode:
                raise
            fallback = _fallback_variant(variant)
            logger.warning("Unsupported variant %r, falling back to %s", variant, fallback)
            compiled = compile_variant(fallback)
        self._compiled: CompiledVariant = compiled
        self._boosts = VocabularyBoostStore()
        self._context: Optional[ConversationContext] = None
        self._statistics = StatisticsCollector()
        self._last_transcript: Optional[Dict[str, str]] = None

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def variant(self) -> str:
        return self._compiled.variant

    @property
    def language(self) -> str:
        return self._compiled.language

    @property
    def options(self) -> EngineOptions:
        return self._options

    @property
    def last_transcript(self) -> Optional[Dict[str, str]]:
        """Last (original, normalized, canonical) triple when preserve_original is on."""
        with self._lock:
            return dict(self._last_transcript) if self._last_transcript else None

    def _context_active(self) -> bool:
        return self._options.context_aware and self._context is not None

    def _restaurant_context(self) -> bool:
        """Only the restaurant context earns the confidence bonus."""
        return self._context_active() and self._context is ConversationContext.RESTAURANT

    # =========================================================================
    # Conversion
    # =========================================================================

    def normalize_text(self, raw) -> str:
        with self._lock:
            text, _ = normalize(self._compiled, raw, self._options)
            return text

    def process_transcript(self, raw) -> str:
        """Run the full normalization pipeline and record statistics."""
        with self._lock:
            canonical, normalized, trace = process(
                self._compiled, raw, self._options, self._context_active(), self._boosts
            )
            if not normalized:
                return ""
            self._statistics.record(trace)
            if self._options.preserve_original:
                self._last_transcript = {
                    "original": raw,
                    "normalized": normalized,
                    "canonical": canonical,
                }
            logger.debug("Processed %r -> %r", raw, canonical)
            return canonical

    def classify_intent(self, text) -> ClassificationResult:
        with self._lock:
            original = text if isinstance(text, str) else ""
            normalized, _ = normalize(self._compiled, text, self._options)
            return self._compiled.classifier.classify(
                original, normalized, self._restaurant_context()
            )

    def calculate_confidence(self, text, pattern: str) -> float:
        """Confidence that ``pattern`` explains ``text``; 0 for empty input."""
        with self._lock:
            normalized, _ = normalize(self._compiled, text, self._options)
            if not normalized or not isinstance(pattern, str):
                return 0.0
            return self._compiled.classifier.confidence(
                normalized, pattern, self._restaurant_context()
            )

    def extract_entities(self, text) -> EntityBag:
        with self._lock:
            prepared = prepare_for_extraction(self._compiled, text, self._options)
            return self._compiled.extractor.extract(prepared)

    def analyze(self, raw) -> Tuple[str, ClassificationResult, EntityBag]:
        """
        process_transcript, classify_intent and extract_entities in one lock
        hold, so a concurrent variant switch cannot split the result.
        """
        with self._lock:
            return (
                self.process_transcript(raw),
                self.classify_intent(raw),
                self.extract_entities(raw),
            )

    # =========================================================================
    # Context
    # =========================================================================

    def set_context(self, context) -> bool:
        """
        Enter a conversation context and boost the food vocabulary.

        Returns False, changing nothing, for an unknown context.
        """
        parsed = _parse_context(context)
        if parsed is None:
            logger.warning("Ignoring unknown context %r", context)
            return False
        with self._lock:
            self._context = parsed
            self._populate_context_boosts(self._boosts, self._compiled)
            return True

    @staticmethod
    def _populate_context_boosts(boosts: VocabularyBoostStore, compiled: CompiledVariant):
        boosts.add_many(
            VocabularyBoostEntry(
                term=entry.source_term,
                replacement=entry.canonical_term,
                confidence=DEFAULT_BOOST_CONFIDENCE,
                source="context",
            )
            for entry in compiled.tables.food
        )

    def get_context(self) -> Optional[str]:
        with self._lock:
            return self._context.value if self._context else None

    def clear_context(self) -> None:
        with self._lock:
            removed = self._boosts.purge("context")
            self._context = None
            logger.debug("Cleared context, dropped %d boosts", removed)

    # =========================================================================
    # Custom Vocabulary
    # =========================================================================

    def add_custom_vocabulary(
        self, term: str, replacement: str, confidence: float = DEFAULT_BOOST_CONFIDENCE
    ) -> bool:
        """Add or replace a custom mapping; False when the input is invalid."""
        try:
            entry = VocabularyBoostEntry(
                term=term, replacement=replacement, confidence=confidence, source="custom"
            )
        except ValidationError as e:
            logger.warning("Rejected custom vocabulary %r: %s", term, e.errors()[0]["msg"])
            return False
        with self._lock:
            return self._boosts.add(entry)

    def remove_custom_vocabulary(self, term: str) -> bool:
        if not isinstance(term, str) or not term.strip():
            return False
        with self._lock:
            return self._boosts.remove(term, source="custom")

    def get_custom_vocabulary(self) -> List[VocabularyBoostEntry]:
        with self._lock:
            return self._boosts.entries("custom")

    # =========================================================================
    # Variants
    # =========================================================================

    def set_variant(self, variant: str) -> bool:
        """Switch language variant. Unknown ids return False and change nothing."""
        try:
            compiled = compile_variant(variant)
        except UnsupportedVariantError as e:
            logger.warning("%s", e)
            return False
        with self._lock:
            if self._context is not None:
                boosts = self._boosts.copy()
                boosts.purge("context")
                self._populate_context_boosts(boosts, compiled)
                self._boosts = boosts
            self._compiled = compiled
            return True

    @staticmethod
    def get_supported_variants() -> List[str]:
        return supported_variants()

    # =========================================================================
    # Statistics
    # =========================================================================

    def get_statistics(self) -> Dict[str, float]:
        with self._lock:
            return self._statistics.report()

    def reset_statistics(self) -> None:
        with self._lock:
            self._statistics.reset()

    # =========================================================================
    # Configuration Export / Import
    # =========================================================================

    def export_configuration(self) -> Dict[str, Any]:
        with self._lock:
            configuration = EngineConfiguration(
                variant=self.variant,
                custom_vocabulary=self._boosts.entries("custom"),
                context=self._context,
                toggles=self._options,
                statistics=self._statistics.snapshot(),
            )
            return configuration.model_dump(mode="json")

    def import_configuration(self, configuration: Union[Dict[str, Any], EngineConfiguration]) -> bool:
        """
        Replace the whole engine state with a snapshot.

        Returns False, leaving the engine untouched, when the snapshot is
        malformed or names an unsupported variant.
        """
        try:
            staged = self._stage_configuration(configuration)
        except ConfigurationImportError as e:
            logger.warning("Configuration import rejected: %s", e)
            return False

        compiled, boosts, context, options, statistics = staged
        with self._lock:
            self._compiled = compiled
            self._boosts = boosts
            self._context = context
            self._options = options
            self._statistics = statistics
            self._last_transcript = None
        logger.info("Imported configuration for %s", compiled.variant)
        return True

    def _stage_configuration(self, configuration):
        if isinstance(configuration, EngineConfiguration):
            parsed = configuration
        else:
            try:
                parsed = EngineConfiguration.model_validate(configuration)
            except ValidationError as e:
                raise ConfigurationImportError(f"invalid snapshot ({e.error_count()} errors)") from e

        try:
            compiled = compile_variant(parsed.variant)
        except UnsupportedVariantError as e:
            raise ConfigurationImportError(str(e)) from e

        boosts = VocabularyBoostStore()
        boosts.add_many(
            entry.model_copy(update={"source": "custom"}) for entry in parsed.custom_vocabulary
        )
        if parsed.context is not None:
            self._populate_context_boosts(boosts, compiled)

        statistics = StatisticsCollector(parsed.statistics)
        return compiled, boosts, parsed.context, parsed.toggles, statistics


def initialize(variant: str = DEFAULT_VARIANT, **options) -> UtteranceEngine:
    """
    Create an engine for a variant, already in restaurant context.

    Keyword arguments are EngineOptions fields (handle_slang=False, ...).
    """
    engine = UtteranceEngine(variant, EngineOptions(**options))
    engine.set_context(ConversationContext.RESTAURANT)
    return engine
