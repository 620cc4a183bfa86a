"""
Services Package for Voice NLU
==============================

Host-side services used by the HTTP adapter. The engine itself never
imports from this package.

- **session.py**: In-memory cache of one UtteranceEngine per session
"""

from .session import clear_sessions, create_session, delete_session, get_session

__all__ = [
    "clear_sessions",
    "create_session",
    "delete_session",
    "get_session",
]
