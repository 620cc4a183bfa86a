"""
French grammar stage.

Handles what speech-to-text gets wrong most often in French orders:

- elision ("je ai" -> "j'ai", "la addition" -> "l'addition")
- liaison artefacts ("les zoeufs" -> "les œufs") and plural agreement after
  plural determiners ("des croissant" -> "des croissants")
- article and adjective agreement with the gender of known nouns
  ("un bière" -> "une bière", "une bière froid" -> "une bière froide")
- partitive contraction ("de le" -> "du") and common conjugation slips

Agreement tables are generated from the gendered noun lists in
``voice_nlu.lexicon.french`` when the stage is built.
"""

import re
from typing import Dict

from ..lexicon import french as lexicon
from ..matching import PhraseMatcher
from .base import GrammarStage, StageResult, run_matchers, substitute_pattern


VOWELS = "aeiouéèêëàâîïôöûüœ"

ELISIONS = {
    "si il": "s'il",
    "si ils": "s'ils",
    "je y": "j'y",
    "jusque à": "jusqu'à",
    "lorsque il": "lorsqu'il",
    "puisque il": "puisqu'il",
    "quelque un": "quelqu'un",
    "presque île": "presqu'île",
    "aujourd hui": "aujourd'hui",
}

# Words before which elision never applies even though they start with a vowel
_NO_ELISION = ("un", "une", "onze", "huit", "oui", "ouate")

_GENERIC_ELISION = re.compile(
    rf"(?<!\w)(je|me|te|se|ne|que|ce|le|la|de) (?=[{VOWELS}])"
    rf"(?!(?:{'|'.join(_NO_ELISION)})(?!\w))",
    re.IGNORECASE,
)

PARTITIVES = {
    "de le": "du",
    "de les": "des",
    "à le": "au",
    "à les": "aux",
}

VERB_AGREEMENT = {
    "je veut": "je veux",
    "je voulez": "je veux",
    "tu veut": "tu veux",
    "il veux": "il veut",
    "elle veux": "elle veut",
    "nous veut": "nous voulons",
    "nous veux": "nous voulons",
    "vous veut": "vous voulez",
    "vous veux": "vous voulez",
    "je voudrait": "je voudrais",
    "nous voudrais": "nous voudrions",
    "vous voudrais": "vous voudriez",
    "je prend": "je prends",
    "je prendre": "je prends",
    "nous prendre": "nous prenons",
    "nous prend": "nous prenons",
    "vous prendre": "vous prenez",
    "vous prend": "vous prenez",
    "je peut": "je peux",
    "il peux": "il peut",
    "nous peut": "nous pouvons",
    "vous peut": "vous pouvez",
    "je est": "je suis",
    "tu est": "tu es",
    "il es": "il est",
    "nous est": "nous sommes",
    "vous est": "vous êtes",
    "je va": "je vais",
    "nous allez": "nous allons",
    "vous allons": "vous allez",
    "j'a": "j'ai",
}

LIAISON_ARTIFACTS = {
    "zoeufs": "œufs",
    "zœufs": "œufs",
    "z'œufs": "œufs",
    "zeuros": "euros",
    "z'euros": "euros",
    "zamis": "amis",
    "z'amis": "amis",
    "zhuîtres": "huîtres",
    "zhuitres": "huîtres",
    "zescargots": "escargots",
    "z'escargots": "escargots",
    "zoignons": "oignons",
    "z'oignons": "oignons",
    "zenfants": "enfants",
    "z'enfants": "enfants",
    "zartichauts": "artichauts",
    "zananas": "ananas",
    "tapéritif": "apéritif",
    "t'apéritif": "apéritif",
}

PLURAL_DETERMINERS = (
    "les", "des", "mes", "tes", "ses", "nos", "vos", "leurs", "ces", "aux",
    "plusieurs", "quelques",
)

# Dishes that take "à la" ("tarte a la crème")
_A_LA_HEADS = (
    "tarte", "poulet", "crème", "sauce", "soupe", "glace", "moules", "steak",
    "côte", "escalope", "filet", "pâtes", "omelette", "salade", "blanquette",
    "sole", "canard",
)

_A_LA = re.compile(rf"(?<!\w)({'|'.join(_A_LA_HEADS)}) a la(?!\w)", re.IGNORECASE)

ACCENTED_FORMS = {
    "creme brulee": "crème brûlée",
    "creme": "crème",
    "cote de boeuf": "côte de bœuf",
    "entrecote": "entrecôte",
    "puree": "purée",
    "cafe": "café",
    "cafe creme": "café crème",
    "biere": "bière",
    "pates": "pâtes",
    "legumes": "légumes",
    "gruyere": "gruyère",
    "rosti": "rösti",
    "saint jacques": "saint-jacques",
    "pot au feu": "pot-au-feu",
    "mille feuille": "mille-feuille",
    "croque monsieur": "croque-monsieur",
    "croque madame": "croque-madame",
    "boeuf": "bœuf",
    "oeuf": "œuf",
    "oeufs": "œufs",
    "gateau": "gâteau",
    "the glace": "thé glacé",
    "fraiche": "fraîche",
}


def _starts_with_vowel(word: str) -> bool:
    return word[0] in VOWELS


def _plural(noun: str) -> str:
    if noun.endswith(("s", "x", "z")):
        return noun
    if noun.endswith(("eau", "au", "eu")):
        return noun + "x"
    return noun + "s"


def _elided(noun: str) -> str:
    return f"l'{noun}"


def article_agreement() -> Dict[str, str]:
    """Wrong article + noun -> article agreeing with the noun's gender."""
    table = {}
    for noun in lexicon.FEMININE_NOUNS:
        table[f"un {noun}"] = f"une {noun}"
        if _starts_with_vowel(noun):
            table[f"du {noun}"] = f"de {_elided(noun)}"
        else:
            table[f"le {noun}"] = f"la {noun}"
            table[f"du {noun}"] = f"de la {noun}"
            table[f"au {noun}"] = f"à la {noun}"
    for noun in lexicon.MASCULINE_NOUNS:
        table[f"une {noun}"] = f"un {noun}"
        if not _starts_with_vowel(noun):
            table[f"la {noun}"] = f"le {noun}"
            table[f"de la {noun}"] = f"du {noun}"
            table[f"à la {noun}"] = f"au {noun}"
    return table


def adjective_agreement() -> Dict[str, str]:
    """Noun + adjective (and bon + noun) agreeing in gender and number."""
    table = {}
    for masculine, feminine in lexicon.ADJECTIVES.items():
        if masculine == feminine:
            continue
        for noun in lexicon.FEMININE_NOUNS:
            table[f"{noun} {masculine}"] = f"{noun} {feminine}"
        for noun in lexicon.FEMININE_PLURAL_NOUNS:
            table[f"{noun} {_plural(masculine)}"] = f"{noun} {_plural(feminine)}"
            table[f"{noun} {masculine}"] = f"{noun} {_plural(feminine)}"
            table[f"{noun} {feminine}"] = f"{noun} {_plural(feminine)}"
        for noun in lexicon.MASCULINE_NOUNS:
            table[f"{noun} {feminine}"] = f"{noun} {masculine}"
    for noun in lexicon.FEMININE_NOUNS:
        table[f"bon {noun}"] = f"bonne {noun}"
    for noun in lexicon.MASCULINE_NOUNS:
        table[f"bonne {noun}"] = f"bon {noun}"
    return table


def plural_agreement() -> Dict[str, str]:
    """Plural determiner + singular noun -> plural noun."""
    table = {}
    nouns = lexicon.FEMININE_NOUNS + lexicon.MASCULINE_NOUNS
    for noun in nouns:
        if " " in noun or "-" in noun:
            continue
        plural = _plural(noun)
        if plural == noun:
            continue
        for determiner in PLURAL_DETERMINERS:
            table[f"{determiner} {noun}"] = f"{determiner} {plural}"
    return table


class FrenchGrammar(GrammarStage):
    language = "fr"

    def __init__(self):
        self._elisions = PhraseMatcher(ELISIONS)
        self._partitives = PhraseMatcher(PARTITIVES, protect_targets=False)
        self._articles = PhraseMatcher(article_agreement())
        self._adjectives = PhraseMatcher(adjective_agreement())
        self._verbs = PhraseMatcher(VERB_AGREEMENT)
        self._liaisons = PhraseMatcher(LIAISON_ARTIFACTS)
        self._plurals = PhraseMatcher(plural_agreement())
        self._accents = PhraseMatcher(ACCENTED_FORMS)

    def normalize_forms(self, text, options):
        if not options.handle_liaison:
            return StageResult(text)
        text, changes = run_matchers(
            text,
            self._elisions.substitute,
            lambda t: substitute_pattern(_GENERIC_ELISION, _elide, t),
        )
        return StageResult(text, liaison=changes)

    def correct_grammar(self, text, options):
        grammar = liaison = 0
        if options.handle_grammar:
            text, grammar = run_matchers(
                text,
                self._partitives.substitute,
                self._articles.substitute,
                self._adjectives.substitute,
                self._verbs.substitute,
            )
        if options.handle_liaison:
            text, liaison = run_matchers(
                text,
                self._liaisons.substitute,
                self._plurals.substitute,
            )
        return StageResult(text, grammar=grammar, liaison=liaison)

    def normalize_constructions(self, text):
        text, changes = run_matchers(
            text,
            self._accents.substitute,
            lambda t: substitute_pattern(_A_LA, r"\1 à la", t),
        )
        return StageResult(text, grammar=changes)


def _elide(match):
    word = match.group(1)
    return word[:-1] + "'"
