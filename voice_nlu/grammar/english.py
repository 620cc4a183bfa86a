"""English grammar stage: contractions, article agreement, stutters, constructions."""

import re

from ..matching import PhraseMatcher
from .base import GrammarStage, StageResult, run_matchers, substitute_pattern


CONTRACTIONS = {
    "i'm": "i am",
    "i'd": "i would",
    "i'll": "i will",
    "i've": "i have",
    "you're": "you are",
    "you'd": "you would",
    "you'll": "you will",
    "you've": "you have",
    "we're": "we are",
    "we'd": "we would",
    "we'll": "we will",
    "we've": "we have",
    "they're": "they are",
    "they'd": "they would",
    "they'll": "they will",
    "they've": "they have",
    "he's": "he is",
    "she's": "she is",
    "it's": "it is",
    "what's": "what is",
    "that's": "that is",
    "there's": "there is",
    "here's": "here is",
    "where's": "where is",
    "how's": "how is",
    "who's": "who is",
    "let's": "let us",
    "isn't": "is not",
    "aren't": "are not",
    "wasn't": "was not",
    "weren't": "were not",
    "don't": "do not",
    "doesn't": "does not",
    "didn't": "did not",
    "can't": "cannot",
    "couldn't": "could not",
    "won't": "will not",
    "wouldn't": "would not",
    "shouldn't": "should not",
    "haven't": "have not",
    "hasn't": "has not",
    "hadn't": "had not",
}

CONSTRUCTIONS = {
    "w/o": "without",
    "w/": "with",
    "with out": "without",
    "xl": "extra large",
    "x-large": "extra large",
    "x large": "extra large",
    "extra-large": "extra large",
    "deep-fried": "deep fried",
    "pan-fried": "pan fried",
    "stir-fried": "stir fried",
    "sauteed": "sautéed",
    "sauted": "sautéed",
    "medium-rare": "medium rare",
    "med rare": "medium rare",
    "well-done": "well done",
}

# "could of" -> "could have"
_MODAL_OF = re.compile(r"(?<!\w)(could|would|should|must|might) of(?!\w)", re.IGNORECASE)

# Repeated function words from hesitant speech: "the the burger"
_STUTTER = re.compile(
    r"(?<!\w)(the|a|an|and|i|to|of|with|some|can|uh|um)(?:\s+\1)+(?!\w)", re.IGNORECASE
)

# Vowel-initial words that take "a" and consonant-initial words that take "an"
_A_EXCEPTIONS = ("one", "once", "uni", "use", "usu", "euro", "eu", "ewe", "uk")
_AN_EXCEPTIONS = ("hour", "honest", "honor", "heir", "herb")

_ARTICLE = re.compile(r"(?<!\w)(a|an) (\w+)", re.IGNORECASE)


def _article_for(match):
    article, word = match.group(1), match.group(2)
    lowered = word.lower()
    starts_with_vowel = lowered[0] in "aeiou"
    if starts_with_vowel and lowered.startswith(_A_EXCEPTIONS):
        wants_an = False
    elif not starts_with_vowel and lowered.startswith(_AN_EXCEPTIONS):
        wants_an = True
    else:
        wants_an = starts_with_vowel
    if lowered[0].isdigit():
        return match.group(0)
    fixed = "an" if wants_an else "a"
    if fixed == article.lower():
        return match.group(0)
    return f"{fixed} {word}"


class EnglishGrammar(GrammarStage):
    language = "en"

    def __init__(self):
        self._contractions = PhraseMatcher(CONTRACTIONS, protect_targets=False)
        self._constructions = PhraseMatcher(CONSTRUCTIONS)

    def normalize_forms(self, text, options):
        if not options.handle_contractions:
            return StageResult(text)
        text, changes = self._contractions.substitute(text)
        return StageResult(text, grammar=changes)

    def correct_grammar(self, text, options):
        if not options.handle_grammar:
            return StageResult(text)
        text, changes = run_matchers(
            text,
            lambda t: substitute_pattern(_STUTTER, r"\1", t),
            lambda t: substitute_pattern(_MODAL_OF, r"\1 have", t),
            lambda t: substitute_pattern(_ARTICLE, _article_for, t),
        )
        return StageResult(text, grammar=changes)

    def normalize_constructions(self, text):
        text, changes = self._constructions.substitute(text)
        return StageResult(text, grammar=changes)

    def capitalize(self, text, proper_nouns):
        text = re.sub(r"(?<!\w)i(?!\w)", "I", text)
        return super().capitalize(text, proper_nouns)
