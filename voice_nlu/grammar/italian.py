"""
Italian grammar stage.

- elision ("la acqua" -> "l'acqua", "c è" -> "c'è") and apostrophes lost by
  speech-to-text ("l acqua" -> "l'acqua")
- articulated prepositions ("di il" -> "del", "a la" -> "alla")
- article and adjective agreement with the gender and number of known
  nouns ("il pizza" -> "la pizza", "i patate" -> "le patate",
  "birra freddo" -> "birra fredda")
- accents typed without them ("caffe" -> "caffè") and "alla" dishes
  ("spaghetti carbonara" -> "spaghetti alla carbonara")

"uno" is read as a number by the numeral stage, so agreement never
rewrites an article to or from "uno".
"""

import re
from typing import Dict

from ..lexicon import italian as lexicon
from ..matching import PhraseMatcher
from .base import GrammarStage, StageResult, run_matchers, substitute_pattern


VOWELS = "aeiouàèéìòù"

ELISIONS = {
    "c è": "c'è",
    "com è": "com'è",
    "dov è": "dov'è",
    "cos è": "cos'è",
    "quant è": "quant'è",
    "un po": "un po'",
    "d accordo": "d'accordo",
}

# Words before which elision never applies even though they start with a vowel
_NO_ELISION = ("un", "uno", "una", "undici", "otto", "io", "ieri", "e", "ed", "o", "od", "ad")

_GENERIC_ELISION = re.compile(
    r"(?<!\w)(lo|la|una|dello|della|allo|alla|nello|nella|sullo|sulla|dallo|dalla"
    rf"|quello|quella) (?=[{VOWELS}])"
    rf"(?!(?:{'|'.join(_NO_ELISION)})(?!\w))",
    re.IGNORECASE,
)

# "l acqua": the apostrophe was dropped, the elided article survived
_SPLIT_APOSTROPHE = re.compile(
    rf"(?<!\w)(l|dell|all|nell|sull|dall|quell) (?=[{VOWELS}])",
    re.IGNORECASE,
)

ARTICULATED_PREPOSITIONS = {
    "di il": "del", "di lo": "dello", "di la": "della",
    "di i": "dei", "di gli": "degli", "di le": "delle",
    "a il": "al", "a lo": "allo", "a la": "alla",
    "a i": "ai", "a gli": "agli", "a le": "alle",
    "in il": "nel", "in lo": "nello", "in la": "nella",
    "in i": "nei", "in gli": "negli", "in le": "nelle",
    "su il": "sul", "su la": "sulla", "su i": "sui", "su le": "sulle",
    "da il": "dal", "da la": "dalla", "da i": "dai", "da le": "dalle",
}

VERB_AGREEMENT = {
    "io vuole": "io voglio",
    "io vuoi": "io voglio",
    "tu voglio": "tu vuoi",
    "lei voglio": "lei vuole",
    "noi vuole": "noi vogliamo",
    "noi vogliono": "noi vogliamo",
    "voi vuole": "voi volete",
    "io vorrebbe": "io vorrei",
    "noi vorrebbe": "noi vorremmo",
    "io prende": "io prendo",
    "noi prende": "noi prendiamo",
    "io può": "io posso",
    "noi può": "noi possiamo",
    "io è": "io sono",
    "noi è": "noi siamo",
    "io ha": "io ho",
    "tu ho": "tu hai",
    "tu ha": "tu hai",
    "noi ha": "noi abbiamo",
}

ACCENTED_FORMS = {
    "caffe": "caffè",
    "perche": "perché",
    "piu": "più",
    "gia": "già",
    "cosi": "così",
    "puo": "può",
    "baccala": "baccalà",
    "baba": "babà",
    "ragu": "ragù",
    "te freddo": "tè freddo",
}

# Dishes named after a style ("spaghetti carbonara" -> "spaghetti alla carbonara")
_ALLA_HEADS = (
    "spaghetti", "pasta", "penne", "rigatoni", "linguine", "bucatini",
    "tagliatelle", "risotto", "pollo", "bistecca", "cotoletta", "saltimbocca",
    "melanzane",
)

_ALLA_STYLES = (
    "carbonara", "amatriciana", "arrabbiata", "puttanesca", "milanese", "romana",
    "fiorentina", "bolognese", "genovese", "cacciatora", "parmigiana",
    "pescatora", "norma",
)

_ALLA = re.compile(
    rf"(?<!\w)({'|'.join(_ALLA_HEADS)}) ({'|'.join(_ALLA_STYLES)})(?!\w)",
    re.IGNORECASE,
)

# "e'" typed for "è"
_E_APOSTROPHE = re.compile(r"(?<!\w)e'(?=\s|$)")


def _starts_with_vowel(word: str) -> bool:
    return word[0] in VOWELS


def _takes_lo(word: str) -> bool:
    """Masculine nouns spelled s+consonant, z, gn, ps, x or y take "lo"/"gli"."""
    return (
        (word[0] == "s" and len(word) > 1 and word[1] not in VOWELS)
        or word.startswith(("z", "gn", "ps", "x", "y"))
    )


def article_agreement() -> Dict[str, str]:
    """Wrong article + noun -> article agreeing with the noun."""
    table = {}
    for noun in lexicon.FEMININE_NOUNS:
        if _starts_with_vowel(noun):
            for wrong in ("il", "lo"):
                table[f"{wrong} {noun}"] = f"l'{noun}"
            table[f"un {noun}"] = f"un'{noun}"
        else:
            for wrong in ("il", "lo"):
                table[f"{wrong} {noun}"] = f"la {noun}"
            table[f"un {noun}"] = f"una {noun}"
            table[f"del {noun}"] = f"della {noun}"
            table[f"al {noun}"] = f"alla {noun}"
            table[f"nel {noun}"] = f"nella {noun}"
    for noun in lexicon.MASCULINE_NOUNS:
        if _starts_with_vowel(noun):
            for wrong in ("il", "la"):
                table[f"{wrong} {noun}"] = f"l'{noun}"
            table[f"una {noun}"] = f"un {noun}"
        elif _takes_lo(noun):
            for wrong in ("il", "la"):
                table[f"{wrong} {noun}"] = f"lo {noun}"
            table[f"del {noun}"] = f"dello {noun}"
            table[f"della {noun}"] = f"dello {noun}"
            table[f"al {noun}"] = f"allo {noun}"
        else:
            for wrong in ("la", "lo"):
                table[f"{wrong} {noun}"] = f"il {noun}"
            table[f"una {noun}"] = f"un {noun}"
            table[f"della {noun}"] = f"del {noun}"
            table[f"alla {noun}"] = f"al {noun}"
            table[f"nella {noun}"] = f"nel {noun}"
    for noun in lexicon.FEMININE_PLURAL_NOUNS:
        for wrong in ("i", "gli"):
            table[f"{wrong} {noun}"] = f"le {noun}"
        table[f"dei {noun}"] = f"delle {noun}"
        table[f"degli {noun}"] = f"delle {noun}"
        table[f"ai {noun}"] = f"alle {noun}"
    for noun in lexicon.MASCULINE_PLURAL_NOUNS:
        if _starts_with_vowel(noun) or _takes_lo(noun):
            article, partitive, wrong_articles = "gli", "degli", ("i", "le")
        else:
            article, partitive, wrong_articles = "i", "dei", ("gli", "le")
        for wrong in wrong_articles:
            table[f"{wrong} {noun}"] = f"{article} {noun}"
        for wrong in ("dei", "degli", "delle"):
            if wrong != partitive:
                table[f"{wrong} {noun}"] = f"{partitive} {noun}"
    return table


def adjective_agreement() -> Dict[str, str]:
    """Noun + adjective in the noun's gender and number."""
    table = {}
    groups = (
        (lexicon.MASCULINE_NOUNS, 0),
        (lexicon.FEMININE_NOUNS, 1),
        (lexicon.MASCULINE_PLURAL_NOUNS, 2),
        (lexicon.FEMININE_PLURAL_NOUNS, 3),
    )
    for masculine, (feminine, masculine_plural, feminine_plural) in lexicon.ADJECTIVES.items():
        forms = (masculine, feminine, masculine_plural, feminine_plural)
        for nouns, index in groups:
            right = forms[index]
            for noun in nouns:
                for wrong in forms:
                    if wrong != right:
                        table[f"{noun} {wrong}"] = f"{noun} {right}"
    return table


class ItalianGrammar(GrammarStage):
    language = "it"

    def __init__(self):
        self._elisions = PhraseMatcher(ELISIONS)
        self._prepositions = PhraseMatcher(ARTICULATED_PREPOSITIONS, protect_targets=False)
        self._articles = PhraseMatcher(article_agreement())
        self._adjectives = PhraseMatcher(adjective_agreement())
        self._verbs = PhraseMatcher(VERB_AGREEMENT)
        self._accents = PhraseMatcher(ACCENTED_FORMS)

    def normalize_forms(self, text, options):
        if not options.handle_liaison:
            return StageResult(text)
        text, changes = run_matchers(
            text,
            lambda t: substitute_pattern(_SPLIT_APOSTROPHE, r"\1'", t),
            self._elisions.substitute,
            lambda t: substitute_pattern(_GENERIC_ELISION, _elide, t),
        )
        return StageResult(text, liaison=changes)

    def correct_grammar(self, text, options):
        if not options.handle_grammar:
            return StageResult(text)
        text, grammar = run_matchers(
            text,
            self._prepositions.substitute,
            self._articles.substitute,
            self._adjectives.substitute,
            self._verbs.substitute,
        )
        return StageResult(text, grammar=grammar)

    def normalize_constructions(self, text):
        text, changes = run_matchers(
            text,
            lambda t: substitute_pattern(_E_APOSTROPHE, "è", t),
            self._accents.substitute,
            lambda t: substitute_pattern(_ALLA, _alla, t),
        )
        return StageResult(text, grammar=changes)


def _elide(match):
    word = match.group(1)
    return word[:-1] + "'"


def _alla(match):
    head, style = match.group(1), match.group(2)
    if _starts_with_vowel(style.lower()):
        return f"{head} all'{style}"
    return f"{head} alla {style}"
