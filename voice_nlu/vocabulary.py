"""
Vocabulary Boost Store.

Runtime override mappings applied as the last substitution pass before
numeral conversion. Entries come from two sources:

- "custom": added by the caller with add_custom_vocabulary
- "context": bulk-inserted from the food lexicon by set_context

A custom entry always wins over a context entry for the same term, and
context population never overwrites a custom entry. The compiled matchers
are rebuilt on every mutation so the next transcript observes the change.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .matching import PhraseMatcher
from .schemas.configuration import VocabularyBoostEntry

logger = logging.getLogger(__name__)


class VocabularyBoostStore:

    def __init__(self, entries: Iterable[VocabularyBoostEntry] = ()):
        self._entries: Dict[str, VocabularyBoostEntry] = {}
        for entry in entries:
            self._entries[entry.term.lower()] = entry
        self._recompile()

    def __len__(self) -> int:
        return len(self._entries)

    def _recompile(self):
        everything = {key: entry.replacement for key, entry in self._entries.items()}
        custom = {
            key: entry.replacement
            for key, entry in self._entries.items()
            if entry.source == "custom"
        }
        self._all_matcher = PhraseMatcher(everything)
        self._custom_matcher = PhraseMatcher(custom)

    def copy(self) -> "VocabularyBoostStore":
        return VocabularyBoostStore(self._entries.values())

    def add(self, entry: VocabularyBoostEntry) -> bool:
        """Insert or replace an entry. Context entries never replace custom ones."""
        key = entry.term.lower()
        existing = self._entries.get(key)
        if entry.source == "context" and existing is not None and existing.source == "custom":
            return False
        self._entries[key] = entry
        self._recompile()
        return True

    def add_many(self, entries: Iterable[VocabularyBoostEntry]) -> int:
        added = 0
        for entry in entries:
            key = entry.term.lower()
            existing = self._entries.get(key)
            if entry.source == "context" and existing is not None and existing.source == "custom":
                continue
            self._entries[key] = entry
            added += 1
        self._recompile()
        return added

    def remove(self, term: str, source: Optional[str] = None) -> bool:
        key = term.strip().lower()
        entry = self._entries.get(key)
        if entry is None or (source is not None and entry.source != source):
            return False
        del self._entries[key]
        self._recompile()
        return True

    def purge(self, source: str) -> int:
        """Drop every entry from one source; returns how many were dropped."""
        keep = {key: entry for key, entry in self._entries.items() if entry.source != source}
        removed = len(self._entries) - len(keep)
        self._entries = keep
        self._recompile()
        return removed

    def entries(self, source: Optional[str] = None) -> List[VocabularyBoostEntry]:
        return [
            entry for entry in self._entries.values()
            if source is None or entry.source == source
        ]

    def substitute(self, text: str, include_context: bool = True) -> Tuple[str, int]:
        matcher = self._all_matcher if include_context else self._custom_matcher
        return matcher.substitute(text)
