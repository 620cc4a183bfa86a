"""
End-to-end tests for German transcript processing (de-DE, de-AT, de-BY, de-CH).
"""
from voice_nlu import initialize


class TestGerman:

    def test_compound_number(self, de_de):
        result = de_de.process_transcript("ich möchte einundzwanzig brezeln")
        assert "21" in result

    def test_article_gender_and_noun_capitals(self, de_de):
        assert de_de.process_transcript("eine bier bitte") == "Ein Bier bitte"

    def test_verb_and_article_agreement(self, de_de):
        assert de_de.process_transcript("ich möchten ein cola") == "Ich möchte eine Cola"

    def test_umlauts_restored(self, de_de):
        assert de_de.normalize_text("ich moechte einen kaese") == "ich möchte einen käse"
        assert de_de.process_transcript("ich moechte einen kaese") == "Ich möchte einen Käse"

    def test_umlauts_never_transliterated(self, de_de):
        assert de_de.process_transcript("ein weißbier") == "Ein Weißbier"

    def test_contractions(self, de_de):
        assert de_de.normalize_text("gibt's hier pommes") == "gibt es hier pommes"

    def test_pommes_rot_weiss(self, de_de):
        result = de_de.process_transcript("pommes rot-weiß bitte")
        assert result == "Pommes Frites mit Ketchup und Mayonnaise bitte"

    def test_processing_is_idempotent(self, de_de):
        for raw in ("eine bier bitte", "pommes rot-weiß bitte"):
            once = de_de.process_transcript(raw)
            assert de_de.process_transcript(once) == once


class TestRegionalGerman:

    def test_austrian_semmeln(self):
        engine = initialize("de-AT")
        assert engine.process_transcript("zwei semmeln bitte") == "2 Brötchen bitte"

    def test_bavarian_dialect(self):
        engine = initialize("de-BY")
        result = engine.process_transcript("mia mog a brezn")
        assert result == "Wir mag eine Brezel"

    def test_bavarian_terms_do_not_apply_in_germany(self, de_de):
        assert de_de.process_transcript("mia") == "Mia"

    def test_swiss_german(self):
        engine = initialize("de-CH")
        result = engine.process_transcript("grüezi, i hätt gern zwöi kafi")
        assert result == "Guten Tag ich hätte gern 2 Kaffee"

    def test_swiss_order_intent(self):
        engine = initialize("de-CH")
        result = engine.classify_intent("i hätt gern e rivella")
        assert result.intent == "order"
        assert result.label == "bestellen"

    def test_swiss_dishes(self):
        bag = initialize("de-CH").extract_entities("zwöi rösti und es rivella")
        assert [n.value for n in bag.numbers] == [2]
        assert [(f.canonical_name, f.category) for f in bag.foods] == [
            ("rösti", "side"),
            ("rivella", "beverage"),
        ]
