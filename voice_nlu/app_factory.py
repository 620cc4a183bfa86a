"""
Application factory for the voice NLU HTTP adapter.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import CORS_ORIGINS, DEFAULT_VARIANT
from .lexicon import supported_variants
from .routes import nlu_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Create a FastAPI application serving the /nlu endpoints.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Voice NLU API",
        description="Utterance normalization and intent/entity extraction for voice ordering",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(nlu_router)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "default_variant": DEFAULT_VARIANT,
            "variants": supported_variants(),
        }

    logger.info("Application created (default variant %s)", DEFAULT_VARIANT)

    return app
