"""
Entity Extractor.

Scans normalized, numeral-converted text once per entity category. Foods use
the food lexicon (longest match first, non-overlapping); modifiers, sizes
and cooking methods use the small closed vocabularies of the language.
Categories are independent of each other: "medium rare" is both a size
("medium") and a cooking method.
"""

import logging
import re

from .lexicon import LexiconMatchers, LexiconTables, categorize_food
from .matching import compile_alternation
from .schemas.results import (
    CookingMethodEntity,
    EntityBag,
    FoodEntity,
    ModifierEntity,
    NumberEntity,
    SizeEntity,
)

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"(?<!\w)\d+(?!\w)")


class EntityExtractor:

    def __init__(self, tables: LexiconTables, matchers: LexiconMatchers):
        self.language = tables.language
        self._food = matchers.food
        self._food_categories = matchers.food_categories
        self._modifiers = compile_alternation(tables.modifiers)
        self._sizes = compile_alternation(tables.sizes)
        self._cooking_methods = compile_alternation(tables.cooking_methods)

    def _category(self, canonical: str) -> str:
        category = self._food_categories.get(canonical.lower())
        return category or categorize_food(canonical, self.language)

    @staticmethod
    def _scan(pattern, text):
        if pattern is None:
            return
        for match in pattern.finditer(text):
            yield match.group(0).lower(), match.start()

    @staticmethod
    def _numbers(text):
        for match in _NUMBER.finditer(text):
            try:
                value = int(match.group(0))
            except ValueError:
                # beyond the interpreter's integer string conversion limit
                logger.debug("Skipping numeric token of %d digits", len(match.group(0)))
                continue
            yield NumberEntity(value=value, text=match.group(0), position=match.start())

    def extract(self, text: str) -> EntityBag:
        if not text:
            return EntityBag()
        foods = [
            FoodEntity(
                name=match.matched,
                canonical_name=match.replacement,
                category=self._category(match.replacement),
                position=match.start,
            )
            for match in self._food.finditer(text)
        ]
        return EntityBag(
            foods=foods,
            numbers=list(self._numbers(text)),
            modifiers=[
                ModifierEntity(type=word, position=pos)
                for word, pos in self._scan(self._modifiers, text)
            ],
            sizes=[
                SizeEntity(size=word, position=pos)
                for word, pos in self._scan(self._sizes, text)
            ],
            cooking_methods=[
                CookingMethodEntity(method=word, position=pos)
                for word, pos in self._scan(self._cooking_methods, text)
            ],
        )
