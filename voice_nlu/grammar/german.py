"""
German grammar stage.

Colloquial contractions are expanded, ASCII spellings of umlauts and ß
("moechte", "fuer", "weiss") are restored for known words, subject/verb and
indefinite article agreement are fixed, and nouns are capitalized on output.
Umlauts already present are never transliterated.
"""

from typing import Dict

from ..lexicon import german as lexicon
from ..matching import PhraseMatcher
from .base import GrammarStage, StageResult, run_matchers


CONTRACTIONS = {
    "gibt's": "gibt es",
    "geht's": "geht es",
    "wie geht's": "wie geht es",
    "ist's": "ist es",
    "hab's": "habe es",
    "nehm's": "nehme es",
    "wär's": "wäre es",
    "so'n": "so ein",
    "so'ne": "so eine",
    "'n": "ein",
    "'ne": "eine",
    "'nen": "einen",
    "haste": "hast du",
    "hasse": "hast du",
    "kannste": "kannst du",
    "willste": "willst du",
    "biste": "bist du",
    "machste": "machst du",
    "gibste": "gibst du",
    "nimmste": "nimmst du",
    "weißte": "weißt du",
}

UMLAUT_SPELLINGS = {
    "moechte": "möchte",
    "moechten": "möchten",
    "fuer": "für",
    "kaese": "käse",
    "koennte": "könnte",
    "koennten": "könnten",
    "koennen": "können",
    "wuerde": "würde",
    "wuerden": "würden",
    "haette": "hätte",
    "haetten": "hätten",
    "waere": "wäre",
    "ueber": "über",
    "naechste": "nächste",
    "zusaetzlich": "zusätzlich",
    "gross": "groß",
    "grosse": "große",
    "grossen": "großen",
    "suess": "süß",
    "weiss": "weiß",
    "weissbier": "weißbier",
    "weisswurst": "weißwurst",
    "weisswein": "weißwein",
    "broetchen": "brötchen",
    "doener": "döner",
    "spaetzle": "spätzle",
    "kaesespaetzle": "käsespätzle",
    "knoedel": "knödel",
    "haehnchen": "hähnchen",
    "gemuese": "gemüse",
    "muesli": "müsli",
    "fruehstueck": "frühstück",
    "gluehwein": "glühwein",
    "loeffel": "löffel",
    "schoen": "schön",
    "getraenk": "getränk",
    "getraenke": "getränke",
    "schwarzwaelder": "schwarzwälder",
    "jaegerschnitzel": "jägerschnitzel",
    "leberkaese": "leberkäse",
    "muenchen": "münchen",
}

# Plural subjects with a singular verb and vice versa. Infinitives after
# "ich" are left alone because "kann ich bezahlen" is correct German.
VERB_AGREEMENT = {
    "ich möchten": "ich möchte",
    "ich hätten": "ich hätte",
    "ich würden": "ich würde",
    "ich könnten": "ich könnte",
    "ich sind": "ich bin",
    "ich ist": "ich bin",
    "wir möchte": "wir möchten",
    "wir hätte": "wir hätten",
    "wir würde": "wir würden",
    "wir könnte": "wir könnten",
    "wir will": "wir wollen",
    "wir kann": "wir können",
    "wir nehme": "wir nehmen",
    "wir habe": "wir haben",
    "wir hat": "wir haben",
    "wir ist": "wir sind",
    "wir bin": "wir sind",
}

# Pommes "rot-weiß" is ketchup and mayonnaise
_FRIES = ("pommes", "pommes frites")
_RED_WHITE = (
    "rot-weiß", "rot-weiss", "rot weiß", "rot weiss", "rotweiß", "rotweiss",
    "schranke", "mit allem",
)

# Words never capitalized even when part of a food name
_FUNCTION_WORDS = frozenset((
    "mit", "und", "ohne", "von", "vom", "zum", "zur", "der", "die", "das",
    "den", "dem", "des", "ein", "eine", "auf", "in", "im", "am", "an",
))


def article_agreement() -> Dict[str, str]:
    """Indefinite article agreeing with the gender of known nouns (accusative)."""
    table = {}
    for noun in lexicon.FEMININE_NOUNS:
        table[f"ein {noun}"] = f"eine {noun}"
        table[f"einen {noun}"] = f"eine {noun}"
        table[f"kein {noun}"] = f"keine {noun}"
    for noun in lexicon.NEUTER_NOUNS:
        table[f"eine {noun}"] = f"ein {noun}"
        table[f"einen {noun}"] = f"ein {noun}"
        table[f"keine {noun}"] = f"kein {noun}"
    for noun in lexicon.MASCULINE_NOUNS:
        table[f"eine {noun}"] = f"einen {noun}"
        table[f"keine {noun}"] = f"keinen {noun}"
    return table


def fries_constructions() -> Dict[str, str]:
    table = {}
    for fries in _FRIES:
        for sauce in _RED_WHITE:
            table[f"{fries} {sauce}"] = "pommes frites mit ketchup und mayonnaise"
        table[f"{fries} rot"] = "pommes frites mit ketchup"
        table[f"{fries} weiß"] = "pommes frites mit mayonnaise"
        table[f"{fries} weiss"] = "pommes frites mit mayonnaise"
    return table


def known_nouns() -> Dict[str, str]:
    """Lower-case noun -> capitalized display form."""
    words = set(lexicon.NOUNS)
    words.update(lexicon.FEMININE_NOUNS, lexicon.MASCULINE_NOUNS, lexicon.NEUTER_NOUNS)
    words.update(lexicon.FOOD_TERMS.values())
    nouns = {}
    for phrase in words:
        for word in phrase.split():
            if word not in _FUNCTION_WORDS:
                nouns[word] = word[0].upper() + word[1:]
    return nouns


class GermanGrammar(GrammarStage):
    language = "de"

    def __init__(self):
        self._contractions = PhraseMatcher(CONTRACTIONS, protect_targets=False)
        self._umlauts = PhraseMatcher(UMLAUT_SPELLINGS)
        self._verbs = PhraseMatcher(VERB_AGREEMENT)
        self._articles = PhraseMatcher(article_agreement())
        self._constructions = PhraseMatcher(fries_constructions())
        self._nouns = PhraseMatcher(known_nouns(), protect_targets=False)

    def normalize_forms(self, text, options):
        grammar = 0
        if options.handle_contractions:
            text, changes = self._contractions.substitute(text)
            grammar += changes
        if options.handle_grammar:
            text, changes = self._umlauts.substitute(text)
            grammar += changes
        return StageResult(text, grammar=grammar)

    def correct_grammar(self, text, options):
        if not options.handle_grammar:
            return StageResult(text)
        text, changes = run_matchers(
            text,
            self._verbs.substitute,
            self._articles.substitute,
        )
        return StageResult(text, grammar=changes)

    def normalize_constructions(self, text):
        text, changes = self._constructions.substitute(text)
        return StageResult(text, grammar=changes)

    def capitalize(self, text, proper_nouns):
        text, _ = self._nouns.substitute(text)
        return super().capitalize(text, proper_nouns)
