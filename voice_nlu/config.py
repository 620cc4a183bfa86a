"""
Configuration Module for Voice NLU
==================================

This module centralizes the environment variables and constants used by the
utterance engine and its HTTP adapter. Values are parsed and typed once at
import time so that a misconfigured deployment fails early.

Configuration Categories:
-------------------------
- **Engine Defaults**: The language variant and conversation context given to
  engines created without explicit settings (HTTP sessions, the CLI).

- **Vocabulary**: Defaults for runtime vocabulary boosts.

- **Session Management**: TTL and cache size for the in-memory cache of
  per-session engines kept by the HTTP adapter.

- **Input Validation**: Maximum transcript length accepted over HTTP.

- **CORS Settings**: Cross-Origin Resource Sharing for browser voice clients.

Environment Variables:
----------------------
- VOICE_NLU_DEFAULT_VARIANT: Variant for new engines (default: "en-US")
- VOICE_NLU_DEFAULT_CONTEXT: Context for new engines (default: "restaurant",
  empty string for none)
- SESSION_TTL_SECONDS: Session cache TTL (default: 3600)
- SESSION_MAX_CACHE_SIZE: Max cached sessions (default: 1000)
- MAX_TRANSCRIPT_LENGTH: Max transcript length (default: 2000)
- CORS_ORIGINS: Comma-separated allowed origins (default: "*")

Usage:
------
    from voice_nlu.config import DEFAULT_VARIANT, SESSION_TTL_SECONDS
"""

import os
from typing import List, Optional


# =============================================================================
# Engine Defaults
# =============================================================================

# Variant used when a caller does not pick one. Must be one of the variants
# registered in voice_nlu.lexicon, otherwise engines fall back with a warning.
DEFAULT_VARIANT: str = os.getenv("VOICE_NLU_DEFAULT_VARIANT", "en-US")

# Restaurant context enables food-term mapping and the context boost.
_default_context_env = os.getenv("VOICE_NLU_DEFAULT_CONTEXT", "restaurant").strip()
DEFAULT_CONTEXT: Optional[str] = _default_context_env.lower() or None

# Bumped whenever the exported configuration layout changes
CONFIGURATION_VERSION: int = 1


# =============================================================================
# Vocabulary Configuration
# =============================================================================

DEFAULT_BOOST_CONFIDENCE: float = 0.8


# =============================================================================
# Session Management Configuration
# =============================================================================
# The HTTP adapter keeps one engine per conversation so that statistics and
# custom vocabulary never leak between customers.

# How long an idle session engine stays in memory (seconds)
SESSION_TTL_SECONDS: int = int(os.getenv("SESSION_TTL_SECONDS", "3600"))  # 1 hour

# Maximum number of session engines to keep in memory
# When exceeded, least recently used sessions are evicted
SESSION_MAX_CACHE_SIZE: int = int(os.getenv("SESSION_MAX_CACHE_SIZE", "1000"))


# =============================================================================
# Input Validation Configuration
# =============================================================================

# Maximum allowed transcript length in characters
MAX_TRANSCRIPT_LENGTH: int = int(os.getenv("MAX_TRANSCRIPT_LENGTH", "2000"))


# =============================================================================
# CORS Configuration
# =============================================================================

# Format: comma-separated list of origins, e.g., "https://kiosk.example.com"
# Default "*" allows all origins (suitable for development only)
_cors_origins_env = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in _cors_origins_env.split(",")
    if origin.strip()
] or ["*"]
