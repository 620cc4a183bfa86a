"""
End-to-end tests for Italian transcript processing (it-IT, it-CH).
"""
from voice_nlu import EngineOptions, UtteranceEngine, initialize


class TestElision:

    def test_la_acqua(self, it_it):
        assert it_it.normalize_text("la acqua frizzante") == "l'acqua frizzante"

    def test_lost_apostrophe(self, it_it):
        assert it_it.normalize_text("l acqua naturale") == "l'acqua naturale"

    def test_fixed_phrases(self, it_it):
        assert it_it.normalize_text("c è un tavolo") == "c'è un tavolo"
        assert it_it.normalize_text("un po di pane") == "un po' di pane"

    def test_no_elision_before_numbers(self, it_it):
        assert it_it.normalize_text("la otto") == "la otto"

    def test_liaison_toggle(self):
        engine = UtteranceEngine("it-IT", EngineOptions(handle_liaison=False))
        assert engine.normalize_text("la acqua") == "la acqua"

    def test_elision_counts_as_liaison(self, it_it):
        it_it.process_transcript("vorrei la acqua")
        assert it_it.get_statistics()["slang_or_liaison_corrections"] == 1


class TestAgreement:

    def test_article_gender(self, it_it):
        result = it_it.process_transcript("il pizza margherita per favore")
        assert result == "La pizza Margherita per favore"

    def test_plural_article(self, it_it):
        assert it_it.process_transcript("i patate fritte") == "Le patate fritte"
        assert it_it.process_transcript("i spaghetti") == "Gli spaghetti"

    def test_adjective_gender(self, it_it):
        assert it_it.process_transcript("una birra freddo") == "Una birra fredda"

    def test_articulated_preposition(self, it_it):
        assert it_it.process_transcript("un piatto di il giorno") == "Un piatto del giorno"

    def test_verb_agreement_and_accent(self, it_it):
        assert it_it.process_transcript("io vuole un caffe") == "Io voglio un caffè"

    def test_grammar_toggle(self):
        engine = UtteranceEngine("it-IT", EngineOptions(handle_grammar=False))
        assert engine.process_transcript("il pizza") == "Il pizza"


class TestConstructions:

    def test_alla_dishes(self):
        engine = UtteranceEngine("it-IT")
        result = engine.process_transcript("spaghetti carbonara e penne arrabbiata")
        assert result == "Spaghetti alla carbonara e penne all'arrabbiata"

    def test_food_context_uses_menu_names(self, it_it):
        result = it_it.process_transcript("spaghetti carbonara")
        assert result == "Spaghetti alla carbonara"

    def test_processing_is_idempotent(self, it_it):
        for raw in ("il pizza margherita", "spaghetti carbonara", "la acqua"):
            once = it_it.process_transcript(raw)
            assert it_it.process_transcript(once) == once


class TestNumbers:

    def test_compound_number(self, it_it):
        assert it_it.process_transcript("ne prendo ventuno") == "Ne prendo 21"

    def test_pizza_names_keep_their_numbers(self, it_it):
        result = it_it.process_transcript("due pizza quattro stagioni")
        assert result == "2 pizza Quattro Stagioni"

    def test_articles_stay_words(self, it_it):
        assert it_it.process_transcript("un caffè") == "Un caffè"


class TestRegionalItalian:

    def test_roman_speech(self, it_it):
        assert it_it.process_transcript("annamo a mangiare") == "Andiamo a mangiare"

    def test_ticino_terms(self):
        engine = initialize("it-CH")
        assert engine.process_transcript("vorrei una fondue") == "Vorrei una fonduta"

    def test_ticino_terms_do_not_apply_in_italy(self, it_it):
        assert it_it.process_transcript("vorrei una fondue") == "Vorrei una fondue"


class TestIntentAndEntities:

    def test_order(self, it_it):
        result = it_it.classify_intent("vorrei una pizza")
        assert result.intent == "order"
        assert result.label == "ordinare"

    def test_pay(self, it_it):
        assert it_it.classify_intent("il conto per favore").intent == "pay"

    def test_remove(self, it_it):
        assert it_it.classify_intent("senza cipolla").intent == "remove"

    def test_entities(self, it_it):
        bag = it_it.extract_entities("vorrei due pizza margherita grande senza cipolla e un tiramisù")
        assert [n.value for n in bag.numbers] == [2]
        assert [s.size for s in bag.sizes] == ["grande"]
        assert [m.type for m in bag.modifiers] == ["senza"]
        assert [(f.canonical_name, f.category) for f in bag.foods] == [
            ("pizza margherita", "main_course"),
            ("tiramisù", "dessert"),
        ]
