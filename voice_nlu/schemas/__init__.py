"""
Schemas Package for Voice NLU
=============================

Pydantic models used by the engine and its HTTP adapter.

Schema Organization:
--------------------
- **results.py**: Intent classification and entity extraction results
- **configuration.py**: Engine options, vocabulary boosts, statistics
  counters and the exported configuration snapshot
- **api.py**: Request and response bodies of the /nlu endpoints
"""

# Result schemas
from .results import (
    UNKNOWN_INTENT,
    ClassificationResult,
    CookingMethodEntity,
    EntityBag,
    FoodEntity,
    ModifierEntity,
    NumberEntity,
    SizeEntity,
)

# Configuration schemas
from .configuration import (
    ConversationContext,
    EngineConfiguration,
    EngineOptions,
    StatisticsCounters,
    VocabularyBoostEntry,
)

# API schemas
from .api import (
    ContextUpdateRequest,
    ProcessRequest,
    ProcessResponse,
    SessionCreateRequest,
    SessionOut,
    VariantUpdateRequest,
    VocabularyCreate,
)

__all__ = [
    # Results
    "UNKNOWN_INTENT",
    "ClassificationResult",
    "CookingMethodEntity",
    "EntityBag",
    "FoodEntity",
    "ModifierEntity",
    "NumberEntity",
    "SizeEntity",
    # Configuration
    "ConversationContext",
    "EngineConfiguration",
    "EngineOptions",
    "StatisticsCounters",
    "VocabularyBoostEntry",
    # API
    "ContextUpdateRequest",
    "ProcessRequest",
    "ProcessResponse",
    "SessionCreateRequest",
    "SessionOut",
    "VariantUpdateRequest",
    "VocabularyCreate",
]
