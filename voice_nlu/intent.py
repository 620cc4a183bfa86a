"""
Intent Classifier.

Intents are tried in taxonomy order (order, add, remove, change, pay, help,
repeat, cancel) and the first one with a trigger phrase present in the text
wins. Ties are resolved by that order, not by the longest or best match, so
"no I want to change my order" is an order intent. This is a known precision
limitation kept for deterministic, compatible behaviour.

Confidence for a (text, trigger phrase) pair is built from:

- base: fraction of the phrase's words present as whole words in the text
- +0.3 when the phrase occurs contiguously
- + up to 0.2 for utterance length (words / language divisor, saturating)
- +0.1 when the restaurant context is active (food context does not count)
- +0.1 when the text looks well formed (articles, modal or auxiliary verbs,
  a contraction, or known restaurant vocabulary)

and is clamped to [0, 1].
"""

import logging
import re
from typing import List, Optional, Pattern, Tuple

from .lexicon import LexiconMatchers, LexiconTables
from .schemas.results import UNKNOWN_INTENT, ClassificationResult

logger = logging.getLogger(__name__)

EXACT_MATCH_BONUS = 0.3
MAX_LENGTH_BONUS = 0.2
CONTEXT_BONUS = 0.1
WELL_FORMED_BONUS = 0.1


def _phrase_pattern(phrase: str) -> Pattern:
    return re.compile(rf"(?<!\w){re.escape(phrase.lower())}(?!\w)", re.IGNORECASE)


class IntentClassifier:

    def __init__(self, tables: LexiconTables, matchers: LexiconMatchers):
        self.divisor = tables.confidence_divisor
        self.structure_words = tables.structure_words
        self._matchers = matchers
        self._triggers: List[Tuple[str, str, List[Tuple[str, Pattern]]]] = [
            (
                pattern.intent,
                pattern.label,
                [(phrase, _phrase_pattern(phrase)) for phrase in pattern.trigger_phrases],
            )
            for pattern in tables.intents
        ]

    def match(self, text: str) -> Optional[Tuple[str, str, str]]:
        """First (intent, label, phrase) whose phrase occurs in the text."""
        for intent, label, phrases in self._triggers:
            for phrase, pattern in phrases:
                if pattern.search(text):
                    return intent, label, phrase
        return None

    def is_well_formed(self, text: str, words: List[str]) -> bool:
        if any(word in self.structure_words for word in words):
            return True
        if "'" in text:
            return True
        return self._matchers.common.contains(text) or self._matchers.food.contains(text)

    def confidence(self, text: str, pattern: str, restaurant_context: bool) -> float:
        text = text.lower()
        words = text.split()
        phrase_words = pattern.lower().split()
        if not words or not phrase_words:
            return 0.0

        present = set(words)
        score = sum(1 for word in phrase_words if word in present) / len(phrase_words)
        if _phrase_pattern(pattern).search(text):
            score += EXACT_MATCH_BONUS
        score += min(MAX_LENGTH_BONUS, len(words) / self.divisor)
        if restaurant_context:
            score += CONTEXT_BONUS
        if self.is_well_formed(text, words):
            score += WELL_FORMED_BONUS
        return max(0.0, min(1.0, score))

    def classify(self, original: str, normalized: str, restaurant_context: bool) -> ClassificationResult:
        found = self.match(normalized) if normalized else None
        if found is None:
            return ClassificationResult(
                intent=UNKNOWN_INTENT,
                confidence=0.0,
                original_text=original,
                processed_text=normalized,
            )
        intent, label, phrase = found
        confidence = self.confidence(normalized, phrase, restaurant_context)
        logger.debug("Classified %r as %s (%.2f) via %r", normalized, intent, confidence, phrase)
        return ClassificationResult(
            intent=intent,
            label=label,
            confidence=confidence,
            matched_pattern=phrase,
            original_text=original,
            processed_text=normalized,
        )
