"""
Tests for spelled-out number conversion in each language.
"""
import pytest

from voice_nlu import UtteranceEngine
from voice_nlu.lexicon import load_tables
from voice_nlu.numerals import NumeralConverter


def converter(variant):
    return NumeralConverter(load_tables(variant))


class TestEnglishNumerals:

    @pytest.mark.parametrize("text,expected", [
        ("twenty-one", "21"),
        ("twenty one", "21"),
        ("two hundred and fifty", "250"),
        ("one thousand two hundred", "1200"),
        ("nineteen hundred", "1900"),
        ("a hundred", "100"),
    ])
    def test_compounds(self, text, expected):
        assert converter("en-US").convert(text) == expected

    def test_adjacent_units_stay_separate(self):
        assert converter("en-US").convert("two three") == "2 3"

    def test_teens_do_not_follow_tens(self):
        assert converter("en-US").convert("sixty ten") == "60 10"

    def test_article_before_dozen(self):
        assert converter("en-US").convert("a dozen eggs") == "1 dozen eggs"

    def test_plain_article_is_left_alone(self):
        assert converter("en-US").convert("a burger") == "a burger"

    def test_and_outside_numbers_is_kept(self):
        text = "fries and a coke"
        assert converter("en-US").convert(text) == text

    def test_numbers_inside_sentence(self):
        result = converter("en-US").convert("i want two burgers and three cokes")
        assert result == "i want 2 burgers and 3 cokes"


class TestFrenchNumerals:

    @pytest.mark.parametrize("text,expected", [
        ("vingt-et-un", "21"),
        ("vingt et un", "21"),
        ("soixante-dix", "70"),
        ("soixante et onze", "71"),
        ("quatre-vingt-dix-sept", "97"),
        ("deux cents", "200"),
        ("cent un", "101"),
        ("deux mille trois", "2003"),
    ])
    def test_compounds(self, text, expected):
        assert converter("fr-FR").convert(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("septante", "70"),
        ("huitante", "80"),
        ("nonante-neuf", "99"),
    ])
    def test_swiss_numerals(self, text, expected):
        assert converter("fr-CH").convert(text) == expected

    def test_un_alone_is_an_article(self):
        assert converter("fr-FR").convert("un café") == "un café"

    def test_une_before_douzaine(self):
        assert converter("fr-FR").convert("une douzaine") == "1 douzaine"


class TestGermanNumerals:

    @pytest.mark.parametrize("text,expected", [
        ("einundzwanzig", "21"),
        ("zweihundertfünfzig", "250"),
        ("zwei tausend", "2000"),
        ("hundert", "100"),
        ("zwo", "2"),
    ])
    def test_compounds(self, text, expected):
        assert converter("de-DE").convert(text) == expected

    def test_ein_before_noun_is_an_article(self):
        assert converter("de-DE").convert("ein bier") == "ein bier"

    def test_ein_dutzend(self):
        assert converter("de-DE").convert("ein dutzend") == "1 dutzend"

    @pytest.mark.parametrize("text,expected", [
        ("zwänzg franke", "20 franke"),
        ("drü tuusig", "3000"),
        ("föif", "5"),
    ])
    def test_swiss_german_numerals(self, text, expected):
        assert converter("de-CH").convert(text) == expected

    def test_vier_jahreszeiten_is_a_name(self):
        assert converter("de-DE").convert("pizza vier jahreszeiten") == "pizza vier jahreszeiten"


class TestItalianNumerals:

    @pytest.mark.parametrize("text,expected", [
        ("ventuno", "21"),
        ("ventitré", "23"),
        ("ventitre", "23"),
        ("centottanta", "180"),
        ("duecentocinquanta", "250"),
        ("due cento", "200"),
        ("cento", "100"),
        ("mille e cinquecento", "1500"),
        ("duemila", "2000"),
        ("tremila cinquecento", "3500"),
        ("uno", "1"),
    ])
    def test_compounds(self, text, expected):
        assert converter("it-IT").convert(text) == expected

    def test_un_alone_is_an_article(self):
        assert converter("it-IT").convert("un caffè") == "un caffè"

    def test_una_dozzina(self):
        assert converter("it-IT").convert("una dozzina") == "1 dozzina"

    def test_e_between_items_is_kept(self):
        assert converter("it-IT").convert("vino e acqua") == "vino e acqua"


class TestNumeralIdioms:

    @pytest.mark.parametrize("variant,text", [
        ("fr-FR", "un mille-feuille"),
        ("fr-FR", "un quatre-quarts"),
        ("it-IT", "pizza quattro stagioni"),
        ("it-IT", "grazie mille"),
        ("en-US", "a seven up"),
    ])
    def test_names_are_not_converted(self, variant, text):
        assert converter(variant).convert(text) == text

    def test_numbers_around_a_name_are_converted(self):
        result = converter("fr-FR").convert("deux mille-feuille et trois cafés")
        assert result == "2 mille-feuille et 3 cafés"


@pytest.mark.parametrize("variant", ["en-US", "fr-FR", "de-DE", "it-IT"])
def test_every_number_word_survives_the_pipeline(variant):
    engine = UtteranceEngine(variant)
    mismatches = {}
    for word, value in load_tables(variant).number_units.items():
        result = engine.process_transcript(word)
        if result != str(value):
            mismatches[word] = result
    assert mismatches == {}


def test_text_without_numbers_is_unchanged():
    assert converter("en-GB").convert("fish and chips") == "fish and chips"
    assert converter("en-GB").convert("") == ""
