"""
End-to-end tests for French transcript processing (fr-FR, fr-CH).
"""
from voice_nlu import EngineOptions, UtteranceEngine


class TestNumbers:

    def test_swiss_septante(self, fr_ch):
        result = fr_ch.process_transcript("je voudrais septante grammes de fromage")
        assert result == "Je voudrais 70 grammes de fromage"

    def test_vingt_et_un(self, fr_fr):
        result = fr_fr.process_transcript("je voudrais vingt-et-un croissants")
        assert result == "Je voudrais 21 croissants"

    def test_un_stays_an_article(self, fr_fr):
        assert fr_fr.process_transcript("un café") == "Un café"


class TestElision:

    def test_je_ai(self, fr_fr):
        assert fr_fr.normalize_text("je ai faim") == "j'ai faim"

    def test_la_addition(self, fr_fr):
        assert fr_fr.normalize_text("la addition s'il vous plaît") == "l'addition s'il vous plaît"

    def test_liaison_toggle(self):
        engine = UtteranceEngine("fr-FR", EngineOptions(handle_liaison=False))
        assert engine.normalize_text("je ai faim") == "je ai faim"

    def test_elision_counts_as_liaison(self, fr_fr):
        fr_fr.process_transcript("je ai faim")
        assert fr_fr.get_statistics()["slang_or_liaison_corrections"] == 1


class TestAgreement:

    def test_article_gender(self, fr_fr):
        result = fr_fr.process_transcript("un bière s'il vous plaît")
        assert result == "Une bière s'il vous plaît"

    def test_adjective_gender(self, fr_fr):
        assert fr_fr.process_transcript("une soupe chaud") == "Une soupe chaude"

    def test_partitive(self, fr_fr):
        assert fr_fr.process_transcript("de le pain") == "Du pain"

    def test_verb_agreement(self, fr_fr):
        assert fr_fr.process_transcript("je veut un café") == "Je veux un café"

    def test_plural_after_determiner(self, fr_fr):
        assert fr_fr.process_transcript("des croissant") == "Des croissants"

    def test_grammar_toggle(self):
        engine = UtteranceEngine("fr-FR", EngineOptions(handle_grammar=False))
        assert engine.process_transcript("un bière") == "Un bière"


class TestConstructions:

    def test_accents_restored(self, fr_fr):
        assert "crème brûlée" in fr_fr.process_transcript("une creme brulee").lower()

    def test_a_la(self, fr_fr):
        assert fr_fr.process_transcript("tarte a la creme") == "Tarte à la crème"

    def test_proper_noun(self, fr_fr):
        assert fr_fr.process_transcript("un verre de bordeaux") == "Un verre de Bordeaux"


def test_processing_is_idempotent(fr_ch):
    for raw in ("un bière s'il vous plaît", "je voudrais septante grammes de fromage"):
        once = fr_ch.process_transcript(raw)
        assert fr_ch.process_transcript(once) == once
