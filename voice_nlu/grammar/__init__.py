"""
Grammar stages, one per language.

A new language needs its lexicon module plus a GrammarStage subclass
registered here.
"""

from .base import GrammarStage, StageResult
from .english import EnglishGrammar
from .french import FrenchGrammar
from .german import GermanGrammar
from .italian import ItalianGrammar

GRAMMAR_STAGES = {
    EnglishGrammar.language: EnglishGrammar,
    FrenchGrammar.language: FrenchGrammar,
    GermanGrammar.language: GermanGrammar,
    ItalianGrammar.language: ItalianGrammar,
}


def grammar_for(language: str) -> GrammarStage:
    return GRAMMAR_STAGES[language]()


__all__ = [
    "EnglishGrammar",
    "FrenchGrammar",
    "GermanGrammar",
    "GrammarStage",
    "ItalianGrammar",
    "StageResult",
    "grammar_for",
]
