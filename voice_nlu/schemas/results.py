"""
Result Schemas for Voice NLU
============================

Pydantic models returned by the conversion calls of the engine. They are
produced fresh for every call and never persisted.

- **ClassificationResult**: Output of ``classify_intent``. ``intent`` is one
  of the fixed taxonomy (order, add, remove, change, pay, help, repeat,
  cancel) or "unknown"; ``label`` is the localized name of that intent.

- **EntityBag**: Output of ``extract_entities``. Every list is independent,
  so one utterance can carry several foods, a size and a modifier at once.
  Positions are character offsets into the normalized text.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


UNKNOWN_INTENT = "unknown"


class ClassificationResult(BaseModel):
    """
    Intent classification of one utterance.

    Attributes:
        intent: Taxonomy intent, or "unknown" when no trigger phrase matched
        label: Localized intent name ("commander", "bestellen", ...)
        confidence: Score in [0, 1]; 0 for unknown
        matched_pattern: Trigger phrase that selected the intent
        original_text: Text as passed in
        processed_text: Normalized text the triggers were matched against
    """
    intent: str = UNKNOWN_INTENT
    label: Optional[str] = None
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    matched_pattern: Optional[str] = None
    original_text: str = ""
    processed_text: str = ""


class FoodEntity(BaseModel):
    name: str = Field(..., description="Term as it appeared in the text")
    canonical_name: str
    category: str = Field(..., description="beverage, dessert, appetizer, meat, seafood, main_course, side or other")
    position: int


class NumberEntity(BaseModel):
    value: int
    text: str
    position: int


class ModifierEntity(BaseModel):
    type: str
    position: int


class SizeEntity(BaseModel):
    size: str
    position: int


class CookingMethodEntity(BaseModel):
    method: str
    position: int


class EntityBag(BaseModel):
    """All entities found in one utterance, each list in text order."""
    foods: List[FoodEntity] = Field(default_factory=list)
    numbers: List[NumberEntity] = Field(default_factory=list)
    modifiers: List[ModifierEntity] = Field(default_factory=list)
    sizes: List[SizeEntity] = Field(default_factory=list)
    cooking_methods: List[CookingMethodEntity] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not (
            self.foods or self.numbers or self.modifiers or self.sizes or self.cooking_methods
        )
