"""
NLU Routes for Voice NLU
========================

HTTP surface over per-session utterance engines. A voice client creates a
session once per conversation, then posts every speech-to-text transcript
to /nlu/process and hands the structured result to the ordering pipeline.

Endpoints:
----------
- POST /nlu/sessions: Create a session engine
- DELETE /nlu/sessions/{session_id}: Drop a session
- POST /nlu/process: Process one transcript
- PUT /nlu/sessions/{session_id}/variant: Switch language variant
- PUT /nlu/sessions/{session_id}/context: Set (or clear with null) the context
- POST /nlu/sessions/{session_id}/vocabulary: Add custom vocabulary
- DELETE /nlu/sessions/{session_id}/vocabulary/{term}: Remove custom vocabulary
- GET /nlu/sessions/{session_id}/statistics: Counters and ratios
- DELETE /nlu/sessions/{session_id}/statistics: Reset counters
- GET /nlu/sessions/{session_id}/configuration: Export a snapshot
- PUT /nlu/sessions/{session_id}/configuration: Import a snapshot

Error Handling:
---------------
- 400: Unsupported variant, rejected vocabulary or configuration
- 404: Unknown or expired session
- 422: Request validation (e.g. transcript longer than MAX_TRANSCRIPT_LENGTH)
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, Response

from ..config import DEFAULT_CONTEXT, DEFAULT_VARIANT
from ..engine import UtteranceEngine
from ..exceptions import UnsupportedVariantError
from ..schemas.api import (
    ContextUpdateRequest,
    ProcessRequest,
    ProcessResponse,
    SessionCreateRequest,
    SessionOut,
    VariantUpdateRequest,
    VocabularyCreate,
)
from ..schemas.configuration import VocabularyBoostEntry
from ..services.session import create_session, delete_session, get_session


logger = logging.getLogger(__name__)

# Router definition
nlu_router = APIRouter(prefix="/nlu", tags=["NLU"])


def _engine_or_404(session_id: str) -> UtteranceEngine:
    engine = get_session(session_id)
    if engine is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return engine


def _session_out(session_id: str, engine: UtteranceEngine) -> SessionOut:
    return SessionOut(session_id=session_id, variant=engine.variant, context=engine.get_context())


# =============================================================================
# Sessions
# =============================================================================

@nlu_router.post("/sessions", response_model=SessionOut, status_code=201)
def create_nlu_session(req: SessionCreateRequest) -> SessionOut:
    """
    Create a session engine.

    The engine always runs in strict mode here: an unsupported variant is a
    client error rather than a silent fallback.
    """
    options = req.options.model_copy(update={"strict_mode": True})
    try:
        engine = UtteranceEngine(req.variant or DEFAULT_VARIANT, options)
    except UnsupportedVariantError as e:
        raise HTTPException(status_code=400, detail=str(e))

    context = req.context.value if req.context else DEFAULT_CONTEXT
    if context:
        engine.set_context(context)

    session_id = create_session(engine)
    logger.info("New NLU session %s (%s, context: %s)", session_id[:8], engine.variant, context or "none")
    return _session_out(session_id, engine)


@nlu_router.delete("/sessions/{session_id}", status_code=204)
def delete_nlu_session(session_id: str) -> Response:
    if not delete_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return Response(status_code=204)


# =============================================================================
# Processing
# =============================================================================

@nlu_router.post("/process", response_model=ProcessResponse)
def process_transcript(req: ProcessRequest) -> ProcessResponse:
    """Normalize a transcript, classify its intent and extract entities."""
    engine = _engine_or_404(req.session_id)
    canonical, classification, entities = engine.analyze(req.text)
    return ProcessResponse(
        session_id=req.session_id,
        canonical_text=canonical,
        classification=classification,
        entities=entities,
    )


# =============================================================================
# Session Settings
# =============================================================================

@nlu_router.put("/sessions/{session_id}/variant", response_model=SessionOut)
def update_variant(session_id: str, req: VariantUpdateRequest) -> SessionOut:
    engine = _engine_or_404(session_id)
    if not engine.set_variant(req.variant):
        raise HTTPException(status_code=400, detail=f"Unsupported language variant: {req.variant}")
    return _session_out(session_id, engine)


@nlu_router.put("/sessions/{session_id}/context", response_model=SessionOut)
def update_context(session_id: str, req: ContextUpdateRequest) -> SessionOut:
    engine = _engine_or_404(session_id)
    if req.context is None:
        engine.clear_context()
    else:
        engine.set_context(req.context)
    return _session_out(session_id, engine)


@nlu_router.get("/sessions/{session_id}/vocabulary", response_model=List[VocabularyBoostEntry])
def list_vocabulary(session_id: str) -> List[VocabularyBoostEntry]:
    return _engine_or_404(session_id).get_custom_vocabulary()


@nlu_router.post("/sessions/{session_id}/vocabulary", status_code=201)
def add_vocabulary(session_id: str, req: VocabularyCreate) -> Dict[str, Any]:
    engine = _engine_or_404(session_id)
    if not engine.add_custom_vocabulary(req.term, req.replacement, req.confidence):
        raise HTTPException(status_code=400, detail="Invalid vocabulary entry")
    return {"term": req.term, "replacement": req.replacement}


@nlu_router.delete("/sessions/{session_id}/vocabulary/{term}", status_code=204)
def remove_vocabulary(session_id: str, term: str) -> Response:
    engine = _engine_or_404(session_id)
    if not engine.remove_custom_vocabulary(term):
        raise HTTPException(status_code=404, detail="Vocabulary entry not found")
    return Response(status_code=204)


# =============================================================================
# Statistics & Configuration
# =============================================================================

@nlu_router.get("/sessions/{session_id}/statistics")
def get_statistics(session_id: str) -> Dict[str, float]:
    return _engine_or_404(session_id).get_statistics()


@nlu_router.delete("/sessions/{session_id}/statistics", status_code=204)
def reset_statistics(session_id: str) -> Response:
    _engine_or_404(session_id).reset_statistics()
    return Response(status_code=204)


@nlu_router.get("/sessions/{session_id}/configuration")
def export_configuration(session_id: str) -> Dict[str, Any]:
    return _engine_or_404(session_id).export_configuration()


@nlu_router.put("/sessions/{session_id}/configuration", response_model=SessionOut)
def import_configuration(session_id: str, configuration: Dict[str, Any]) -> SessionOut:
    engine = _engine_or_404(session_id)
    if not engine.import_configuration(configuration):
        raise HTTPException(status_code=400, detail="Invalid configuration")
    return _session_out(session_id, engine)
