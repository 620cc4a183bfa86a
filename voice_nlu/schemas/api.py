"""
HTTP Schemas for Voice NLU
==========================

Request and response bodies of the /nlu endpoints.

Endpoint Coverage:
------------------
- POST /nlu/sessions: Create a session engine
- POST /nlu/process: Normalize, classify and extract one transcript
- PUT /nlu/sessions/{id}/variant: Switch language variant
- PUT /nlu/sessions/{id}/context: Set or clear the conversation context
- POST /nlu/sessions/{id}/vocabulary: Add a custom vocabulary entry

Validation:
-----------
- Transcript length is capped by MAX_TRANSCRIPT_LENGTH (default: 2000
  chars); longer bodies are rejected with 422 before reaching an engine.
- Unknown engine options are rejected by EngineOptions.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..config import DEFAULT_BOOST_CONFIDENCE, MAX_TRANSCRIPT_LENGTH
from .configuration import ConversationContext, EngineOptions
from .results import ClassificationResult, EntityBag


class SessionCreateRequest(BaseModel):
    """
    Request body for creating a session.

    Attributes:
        variant: Language variant; server default when omitted
        context: Initial context; server default when omitted
        options: Engine toggles
    """
    variant: Optional[str] = None
    context: Optional[ConversationContext] = None
    options: EngineOptions = Field(default_factory=EngineOptions)


class SessionOut(BaseModel):
    session_id: str
    variant: str
    context: Optional[str] = None


class ProcessRequest(BaseModel):
    session_id: str
    text: str = Field(..., max_length=MAX_TRANSCRIPT_LENGTH)


class ProcessResponse(BaseModel):
    """
    Everything the engine derived from one transcript.

    Attributes:
        session_id: Session the transcript was processed in
        canonical_text: Output of the full normalization pipeline
        classification: Intent and confidence
        entities: Foods, numbers, modifiers, sizes and cooking methods
    """
    session_id: str
    canonical_text: str
    classification: ClassificationResult
    entities: EntityBag


class VariantUpdateRequest(BaseModel):
    variant: str


class ContextUpdateRequest(BaseModel):
    context: Optional[ConversationContext] = None


class VocabularyCreate(BaseModel):
    term: str
    replacement: str
    confidence: float = DEFAULT_BOOST_CONFIDENCE
