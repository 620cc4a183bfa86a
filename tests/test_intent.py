"""
Tests for intent classification and confidence scoring.
"""
import pytest

from voice_nlu.schemas.results import UNKNOWN_INTENT


class TestClassifyIntent:

    def test_order(self, en_us):
        result = en_us.classify_intent("I'd like a cheeseburger and fries please")
        assert result.intent == "order"
        assert result.label == "order"
        assert result.matched_pattern == "i would like"
        assert result.confidence >= 0.5
        assert result.original_text == "I'd like a cheeseburger and fries please"
        assert result.processed_text == "i would like a cheeseburger and fries please"

    @pytest.mark.parametrize("text,intent", [
        ("can i get a burger", "order"),
        ("what's good here", "help"),
        ("cancel that", "cancel"),
        ("how much is it", "pay"),
    ])
    def test_english_intents(self, en_us, text, intent):
        assert en_us.classify_intent(text).intent == intent

    def test_first_match_wins(self, en_us):
        """Taxonomy order decides, so a change request mentioning an order is an order."""
        assert en_us.classify_intent("i want to change my order").intent == "order"

    def test_unknown(self, en_us):
        result = en_us.classify_intent("hello there")
        assert result.intent == UNKNOWN_INTENT
        assert result.label is None
        assert result.confidence == 0.0
        assert result.matched_pattern is None

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty_input(self, en_us, raw):
        result = en_us.classify_intent(raw)
        assert result.intent == UNKNOWN_INTENT
        assert result.confidence == 0.0

    def test_deterministic(self, en_us):
        first = en_us.classify_intent("can i get a coke")
        for _ in range(5):
            assert en_us.classify_intent("can i get a coke") == first

    def test_localized_labels(self, fr_fr, de_de):
        french = fr_fr.classify_intent("je voudrais un café")
        assert (french.intent, french.label) == ("order", "commander")
        german = de_de.classify_intent("die rechnung bitte")
        assert (german.intent, german.label) == ("pay", "bezahlen")


class TestConfidence:

    def test_partial_match_without_context(self, plain_engine):
        # no phrase words, 1 word / 12, not well formed
        assert plain_engine.calculate_confidence("hello", "i want") == pytest.approx(1 / 12)

    def test_context_bonus(self, en_us):
        assert en_us.calculate_confidence("hello", "i want") == pytest.approx(1 / 12 + 0.1)

    def test_food_context_earns_no_bonus(self, plain_engine):
        assert plain_engine.set_context("food") is True
        assert plain_engine.calculate_confidence("hello", "i want") == pytest.approx(1 / 12)

    def test_well_formed_bonus(self, plain_engine):
        # half the phrase words present, 2 words / 12, "the" is a structure word
        score = plain_engine.calculate_confidence("the want", "i want")
        assert score == pytest.approx(0.5 + 2 / 12 + 0.1)

    def test_clamped_to_one(self, en_us):
        assert en_us.calculate_confidence("i want a burger", "i want") == 1.0

    def test_empty_text(self, en_us):
        assert en_us.calculate_confidence("", "i want") == 0.0
        assert en_us.calculate_confidence(None, "i want") == 0.0
