"""
Tests for variant registration, switching and fallback.
"""
import threading

import pytest

from voice_nlu import EngineOptions, UnsupportedVariantError, UtteranceEngine, initialize
from voice_nlu.lexicon import (
    categorize_food,
    default_variant_for,
    language_of,
    load_tables,
    resolve_variant,
    supported_variants,
)


class TestRegistry:

    def test_supported_variants(self):
        variants = UtteranceEngine.get_supported_variants()
        assert variants == supported_variants()
        for variant in (
            "en-US", "en-GB", "fr-FR", "fr-CH", "de-DE", "de-AT", "de-BY", "de-CH",
            "it-IT", "it-CH",
        ):
            assert variant in variants

    @pytest.mark.parametrize("raw,expected", [
        ("en-US", "en-US"),
        ("fr_ch", "fr-CH"),
        (" DE-at ", "de-AT"),
    ])
    def test_resolve_variant(self, raw, expected):
        assert resolve_variant(raw) == expected

    @pytest.mark.parametrize("raw", ["xx-YY", "", None, "en"])
    def test_resolve_unknown(self, raw):
        with pytest.raises(UnsupportedVariantError) as exc_info:
            resolve_variant(raw)
        assert exc_info.value.variant == raw

    def test_languages(self):
        assert language_of("fr-CH") == "fr"
        assert default_variant_for("de") == "de-DE"
        assert default_variant_for("it") == "it-IT"
        assert default_variant_for("es") is None

    def test_tables_are_cached(self):
        assert load_tables("en-GB") is load_tables("en-gb")

    def test_categorize_food(self):
        assert categorize_food("iced tea", "en") == "beverage"
        assert categorize_food("steak", "en") == "meat"
        assert categorize_food("shrimp cocktail", "en") == "appetizer"
        assert categorize_food("spam", "en") == "other"
        assert categorize_food("schweinebraten", "de") == "meat"
        assert categorize_food("spaghetti alla carbonara", "it") == "main_course"
        assert categorize_food("affogato al caffè", "it") == "dessert"
        assert categorize_food("risotto ai frutti di mare", "it") == "main_course"
        assert categorize_food("tè freddo", "it") == "beverage"


class TestConstruction:

    def test_strict_mode_raises(self):
        with pytest.raises(UnsupportedVariantError):
            UtteranceEngine("xx-YY", EngineOptions(strict_mode=True))

    def test_fallback_to_language_default(self):
        engine = UtteranceEngine("fr-BE")
        assert engine.variant == "fr-FR"
        assert engine.language == "fr"

    def test_fallback_to_global_default(self):
        assert UtteranceEngine("xx-YY").variant == "en-US"

    def test_initialize_sets_restaurant_context(self):
        engine = initialize("de-DE", handle_slang=False)
        assert engine.get_context() == "restaurant"
        assert engine.options.handle_slang is False

    def test_unknown_option_is_rejected(self):
        with pytest.raises(ValueError):
            initialize("en-US", bogus=True)


class TestSetVariant:

    def test_switch(self, en_us):
        assert en_us.set_variant("fr-CH") is True
        assert en_us.variant == "fr-CH"
        assert en_us.process_transcript("septante") == "70"

    def test_unknown_variant_changes_nothing(self, en_us):
        assert en_us.set_variant("xx-YY") is False
        assert en_us.variant == "en-US"
        assert en_us.process_transcript("can i get chips") == "Can I get french fries"

    def test_switch_keeps_custom_vocabulary(self, en_us):
        en_us.add_custom_vocabulary("xyz", "Canonical")
        en_us.set_variant("en-GB")
        assert en_us.process_transcript("xyz") == "Canonical"


def test_concurrent_processing_and_switching(en_us):
    """Switching variants while processing never yields a broken result."""
    errors = []

    def worker():
        for _ in range(20):
            result = en_us.process_transcript("two burgers please")
            if result not in ("2 burgers please", "Two burgers please"):
                errors.append(result)

    def switcher():
        for variant in ("en-GB", "en-US") * 5:
            en_us.set_variant(variant)

    threads = [threading.Thread(target=worker) for _ in range(3)]
    threads.append(threading.Thread(target=switcher))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert en_us.get_statistics()["total_processed"] == 60


class TestAnalyze:

    def test_matches_separate_calls(self, fr_ch):
        text = "je voudrais septante grammes de fromage"
        canonical, classification, entities = fr_ch.analyze(text)

        assert canonical == "Je voudrais 70 grammes de fromage"
        assert classification == fr_ch.classify_intent(text)
        assert entities == fr_ch.extract_entities(text)
        assert fr_ch.get_statistics()["total_processed"] == 1

    def test_one_variant_per_result_while_switching(self):
        engine = UtteranceEngine("fr-CH")
        mixed = []

        def worker():
            for _ in range(20):
                canonical, _, entities = engine.analyze("je voudrais septante grammes")
                converted = "70" in canonical
                if converted != ([n.value for n in entities.numbers] == [70]):
                    mixed.append((canonical, entities.numbers))

        def switcher():
            for variant in ("en-US", "fr-CH") * 10:
                engine.set_variant(variant)

        threads = [threading.Thread(target=worker) for _ in range(3)]
        threads.append(threading.Thread(target=switcher))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert mixed == []
