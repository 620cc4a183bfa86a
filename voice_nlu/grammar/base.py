"""
Grammar Stage interface.

Every language supplies one GrammarStage. The pipeline calls it at three
points (normalization, grammar correction, construction normalization) and
once more during cleanup for capitalization; everything else in the pipeline
is language-neutral.

Toggles are read from the engine options object passed in
(``handle_grammar``, ``handle_contractions``, ``handle_liaison``).
"""

from abc import ABC, abstractmethod
from typing import Callable, NamedTuple, Pattern, Tuple

from ..matching import PhraseMatcher


class StageResult(NamedTuple):
    """Text after a grammar step plus the number of corrections it made.

    ``grammar`` feeds the grammar_corrections counter; ``liaison`` feeds
    slang_or_liaison_corrections.
    """

    text: str
    grammar: int = 0
    liaison: int = 0


def substitute_pattern(
    pattern: Pattern, replacement, text: str
) -> Tuple[str, int]:
    """``re.subn`` that only counts substitutions which changed the text."""
    changes = 0

    def _replace(match):
        nonlocal changes
        new = replacement(match) if callable(replacement) else match.expand(replacement)
        if new != match.group(0):
            changes += 1
        return new

    return pattern.sub(_replace, text), changes


class GrammarStage(ABC):
    """Language-specific corrections plugged into the normalization pipeline."""

    language: str = ""

    @abstractmethod
    def normalize_forms(self, text: str, options) -> StageResult:
        """Sub-step of normalize_text: contraction expansion or elision repair."""

    @abstractmethod
    def correct_grammar(self, text: str, options) -> StageResult:
        """Grammar correction stage; each toggle gates its own rules."""

    @abstractmethod
    def normalize_constructions(self, text: str) -> StageResult:
        """Canonical spelling of compound constructions ("w/o" -> "without")."""

    def capitalize(self, text: str, proper_nouns: PhraseMatcher) -> str:
        """Apply display casing for known proper nouns."""
        text, _ = proper_nouns.substitute(text)
        return text


def run_matchers(text: str, *steps: Callable[[str], Tuple[str, int]]) -> Tuple[str, int]:
    """Apply substitution steps in order, summing their change counts."""
    total = 0
    for step in steps:
        text, changes = step(text)
        total += changes
    return text, total
