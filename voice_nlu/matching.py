"""
Compiled phrase matching shared by every substitution stage.

A PhraseMatcher turns a ``{source: replacement}`` table into a single regex
alternation with the longest phrases first, so one pass over the text
replaces each phrase at most once and multi-word entries win over their
single-word prefixes ("french fries" before "fries").

Replacement targets are registered as identity entries. Text that is already
canonical therefore matches its own entry and is left alone, which keeps
repeated passes stable ("fries" -> "french fries" never becomes
"french french fries").
"""

import re
from typing import Dict, Iterable, Iterator, Mapping, NamedTuple, Optional, Pattern, Tuple


class PhraseMatch(NamedTuple):
    start: int
    end: int
    matched: str
    replacement: str


def compile_alternation(terms: Iterable[str], whole_word: bool = True) -> Optional[Pattern]:
    """Compile terms into one case-insensitive, longest-first alternation.

    Returns None for an empty vocabulary.
    """
    unique = sorted({t.lower() for t in terms if t}, key=lambda t: (-len(t), t))
    if not unique:
        return None
    alternation = "|".join(re.escape(term) for term in unique)
    if whole_word:
        return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)", re.IGNORECASE)
    return re.compile(f"(?:{alternation})", re.IGNORECASE)


class PhraseMatcher:
    """Case-insensitive phrase table compiled into a single pattern.

    Args:
        mapping: source phrase -> replacement. Keys are matched
            case-insensitively; replacements are inserted verbatim.
        whole_word: When False, phrases also match inside longer tokens.
        protect_targets: Register every replacement as an identity entry.
    """

    def __init__(
        self,
        mapping: Mapping[str, str],
        whole_word: bool = True,
        protect_targets: bool = True,
    ):
        table: Dict[str, str] = {}
        for source, replacement in mapping.items():
            if source and replacement is not None:
                table[source.lower()] = replacement
        if protect_targets:
            for replacement in list(table.values()):
                if replacement:
                    table.setdefault(replacement.lower(), replacement)

        self.whole_word = whole_word
        self._table = table
        self._pattern = compile_alternation(table, whole_word=whole_word)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, phrase: str) -> bool:
        return phrase.lower() in self._table

    def lookup(self, phrase: str) -> Optional[str]:
        return self._table.get(phrase.lower())

    def finditer(self, text: str) -> Iterator[PhraseMatch]:
        """Yield non-overlapping matches, leftmost first."""
        if self._pattern is None or not text:
            return
        for match in self._pattern.finditer(text):
            matched = match.group(0)
            yield PhraseMatch(
                match.start(), match.end(), matched, self._table[matched.lower()]
            )

    def contains(self, text: str) -> bool:
        return self._pattern is not None and bool(text) and self._pattern.search(text) is not None

    def substitute(self, text: str) -> Tuple[str, int]:
        """Replace every known phrase in one pass.

        Returns:
            (new_text, changes) where changes counts matches whose replacement
            differs from the matched text by more than letter case.
        """
        if self._pattern is None or not text:
            return text, 0

        changes = 0

        def _replace(match):
            nonlocal changes
            matched = match.group(0)
            replacement = self._table[matched.lower()]
            if replacement.lower() != matched.lower():
                changes += 1
            return replacement

        return self._pattern.sub(_replace, text), changes
