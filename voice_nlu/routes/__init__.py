"""
Routes Package for Voice NLU
============================

API route definitions for the HTTP adapter. Each module defines a FastAPI
APIRouter with a prefix and tags for OpenAPI documentation:

    nlu_router = APIRouter(prefix="/nlu", tags=["NLU"])

- nlu.py: Session engines, transcript processing, vocabulary, statistics
  and configuration endpoints

Error Handling:
---------------
Routes raise HTTPException for error conditions:
- 400: Bad request (unsupported variant, rejected input)
- 404: Not found (unknown session)

Usage:
------
    from voice_nlu.routes import nlu_router
    app.include_router(nlu_router)
"""

from .nlu import nlu_router

__all__ = [
    "nlu_router",
]
