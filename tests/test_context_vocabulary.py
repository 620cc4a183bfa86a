"""
Tests for conversation context and runtime vocabulary boosts.
"""
import pytest

from voice_nlu import ConversationContext, EngineOptions, UtteranceEngine
from voice_nlu.schemas.configuration import VocabularyBoostEntry
from voice_nlu.vocabulary import VocabularyBoostStore


class TestContext:

    def test_food_terms_need_context(self, plain_engine):
        assert plain_engine.process_transcript("i want wings") == "I want wings"
        assert plain_engine.set_context("restaurant") is True
        assert plain_engine.process_transcript("i want wings") == "I want chicken wings"
        assert plain_engine.get_statistics()["context_matches"] == 1

    def test_clear_context(self, en_us):
        assert en_us.get_context() == "restaurant"
        en_us.clear_context()
        assert en_us.get_context() is None
        assert en_us.process_transcript("i want wings") == "I want wings"

    def test_food_context(self, plain_engine):
        assert plain_engine.set_context(ConversationContext.FOOD)
        assert plain_engine.get_context() == "food"

    @pytest.mark.parametrize("context", ["bank", "", None, 3])
    def test_unknown_context_is_rejected(self, en_us, context):
        assert en_us.set_context(context) is False
        assert en_us.get_context() == "restaurant"

    def test_context_aware_off(self):
        engine = UtteranceEngine("en-US", EngineOptions(context_aware=False))
        engine.set_context("restaurant")
        assert engine.process_transcript("i want wings") == "I want wings"

    def test_context_follows_variant_switch(self, en_us):
        assert en_us.set_variant("de-DE")
        assert en_us.get_context() == "restaurant"
        assert en_us.process_transcript("pommes") == "Pommes Frites"


class TestCustomVocabulary:

    def test_add_and_remove(self, plain_engine):
        assert plain_engine.add_custom_vocabulary("xyz", "Canonical") is True
        assert plain_engine.process_transcript("xyz please") == "Canonical please"
        assert plain_engine.get_statistics()["confidence_boosts"] == 1

        assert plain_engine.remove_custom_vocabulary("xyz") is True
        assert plain_engine.process_transcript("xyz please") == "Xyz please"

    def test_replace_existing_term(self, plain_engine):
        plain_engine.add_custom_vocabulary("xyz", "first")
        plain_engine.add_custom_vocabulary("XYZ", "second")
        entries = plain_engine.get_custom_vocabulary()
        assert [(e.term, e.replacement) for e in entries] == [("XYZ", "second")]

    @pytest.mark.parametrize("term,replacement,confidence", [
        ("", "x", 0.8),
        ("   ", "x", 0.8),
        ("xyz", "", 0.8),
        ("xyz", "x", 1.5),
        (None, "x", 0.8),
    ])
    def test_invalid_entries_are_rejected(self, plain_engine, term, replacement, confidence):
        assert plain_engine.add_custom_vocabulary(term, replacement, confidence) is False
        assert plain_engine.get_custom_vocabulary() == []

    def test_remove_unknown(self, plain_engine):
        assert plain_engine.remove_custom_vocabulary("nothing") is False
        assert plain_engine.remove_custom_vocabulary(None) is False

    def test_custom_entries_survive_context_changes(self, plain_engine):
        plain_engine.add_custom_vocabulary("wings", "hot wings")
        plain_engine.set_context("restaurant")
        plain_engine.clear_context()
        assert [e.term for e in plain_engine.get_custom_vocabulary()] == ["wings"]
        assert plain_engine.process_transcript("wings") == "Hot wings"

    def test_context_boosts_are_not_listed(self, en_us):
        assert en_us.get_custom_vocabulary() == []


class TestVocabularyBoostStore:

    def test_context_never_overwrites_custom(self):
        store = VocabularyBoostStore()
        store.add(VocabularyBoostEntry(term="wings", replacement="hot wings"))
        added = store.add(VocabularyBoostEntry(term="wings", replacement="chicken wings", source="context"))
        assert added is False
        assert store.substitute("wings") == ("hot wings", 1)

    def test_context_entries_need_context(self):
        store = VocabularyBoostStore([
            VocabularyBoostEntry(term="wings", replacement="chicken wings", source="context"),
        ])
        assert store.substitute("wings", include_context=False) == ("wings", 0)
        assert store.substitute("wings") == ("chicken wings", 1)

    def test_purge(self):
        store = VocabularyBoostStore([
            VocabularyBoostEntry(term="a", replacement="b", source="context"),
            VocabularyBoostEntry(term="c", replacement="d"),
        ])
        assert store.purge("context") == 1
        assert [e.term for e in store.entries()] == ["c"]
        assert len(store) == 1
