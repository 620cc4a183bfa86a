"""
Configuration Schemas for Voice NLU
===================================

Typed engine options, vocabulary boost entries and the exported
configuration snapshot.

EngineOptions replaces a loose option dictionary: every toggle is named,
typed and defaulted here, and unknown keys are rejected.

EngineConfiguration is the only persisted artifact of the engine. Callers
should store it as an opaque, versioned JSON blob:

    snapshot = engine.export_configuration()      # dict, JSON-ready
    ...
    engine.import_configuration(snapshot)         # True / False
"""

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import CONFIGURATION_VERSION, DEFAULT_BOOST_CONFIDENCE


class ConversationContext(str, Enum):
    """Conversation modes that enable food vocabulary."""
    RESTAURANT = "restaurant"
    FOOD = "food"


class EngineOptions(BaseModel):
    """
    Behaviour toggles for one engine instance.

    Attributes:
        strict_mode: Raise on an unsupported variant at construction instead
            of falling back to a default variant
        preserve_original: Keep the last (original, normalized, canonical)
            transcript triple for debugging
        context_aware: Allow the conversation context to enable food-term
            mapping, context boosts and the restaurant confidence bonus
        enable_regional_dialects: Run the regional dialect mapping stage
        handle_grammar: Grammar correction rules
        handle_contractions: Contraction expansion (English, German)
        handle_liaison: Elision and liaison repair (French, Italian)
        handle_slang: Slang correction (English)
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    strict_mode: bool = False
    preserve_original: bool = False
    context_aware: bool = True
    enable_regional_dialects: bool = True
    handle_grammar: bool = True
    handle_contractions: bool = True
    handle_liaison: bool = True
    handle_slang: bool = True


class VocabularyBoostEntry(BaseModel):
    """
    A runtime override mapping applied after the static stages.

    Attributes:
        term: Phrase to replace (matched whole-word, case-insensitive)
        replacement: Text inserted in its place
        confidence: Caller's confidence in the mapping
        source: "custom" for caller entries, "context" for entries added by
            set_context
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    term: str = Field(..., min_length=1)
    replacement: str = Field(..., min_length=1)
    confidence: float = Field(DEFAULT_BOOST_CONFIDENCE, ge=0.0, le=1.0)
    source: Literal["custom", "context"] = "custom"


class StatisticsCounters(BaseModel):
    """Raw processing counters; monotonic until reset."""
    total_processed: int = Field(0, ge=0)
    dialect_words_found: int = Field(0, ge=0)
    replacements_made: int = Field(0, ge=0)
    confidence_boosts: int = Field(0, ge=0)
    context_matches: int = Field(0, ge=0)
    grammar_corrections: int = Field(0, ge=0)
    slang_or_liaison_corrections: int = Field(0, ge=0)


class EngineConfiguration(BaseModel):
    """
    Serializable snapshot of an engine.

    Context boosts are not exported; they are rebuilt from the lexicon when
    the snapshot's context is applied.
    """
    version: int = Field(CONFIGURATION_VERSION, ge=1, le=CONFIGURATION_VERSION)
    variant: str = Field(..., min_length=1)
    custom_vocabulary: List[VocabularyBoostEntry] = Field(default_factory=list)
    context: Optional[ConversationContext] = None
    toggles: EngineOptions = Field(default_factory=EngineOptions)
    statistics: StatisticsCounters = Field(default_factory=StatisticsCounters)
