"""
Session Engine Cache for Voice NLU
==================================

The HTTP adapter keeps one UtteranceEngine per conversation session so that
custom vocabulary, context and statistics never leak between customers.
Engines live only in memory; a host that needs durability persists the
exported configuration of a session and imports it into a new one.

Session Data Structure:
-----------------------
SESSION_CACHE maps a session id to:
- engine: the session's UtteranceEngine
- last_access: timestamp of the last request that touched it

Cache Eviction Strategy:
------------------------
1. **TTL-based**: Sessions not accessed within SESSION_TTL_SECONDS are
   dropped. Checked probabilistically (~1% of lookups) to avoid overhead.

2. **LRU-based**: When the cache reaches SESSION_MAX_CACHE_SIZE, the oldest
   10% of sessions (by last access time) are evicted to make room.

Thread Safety:
--------------
Cache operations are protected by a threading.Lock because FastAPI runs
sync endpoints in a thread pool. Each engine additionally guards its own
state with its own lock.

Configuration:
--------------
See config.py for these settings:
- SESSION_TTL_SECONDS: How long idle sessions stay cached (default: 1 hour)
- SESSION_MAX_CACHE_SIZE: Maximum cached sessions (default: 1000)

Usage:
------
    from voice_nlu.services.session import create_session, get_session

    session_id = create_session(engine)
    engine = get_session(session_id)
    if engine is None:
        raise HTTPException(404, "Session not found")
"""

import logging
import random
import threading
import time
import uuid
from typing import Any, Dict, Optional

from ..config import SESSION_MAX_CACHE_SIZE, SESSION_TTL_SECONDS
from ..engine import UtteranceEngine


logger = logging.getLogger(__name__)


# =============================================================================
# Session Cache
# =============================================================================
# {session_id: {"engine": UtteranceEngine, "last_access": timestamp}}

SESSION_CACHE: Dict[str, Dict[str, Any]] = {}
_cache_lock = threading.Lock()


# =============================================================================
# Cache Maintenance Functions
# =============================================================================

def _cleanup_expired_sessions() -> int:
    """
    Remove sessions that have not been accessed within SESSION_TTL_SECONDS.

    Returns:
        int: Number of sessions removed from cache
    """
    now = time.time()
    expired = []

    with _cache_lock:
        for sid, entry in SESSION_CACHE.items():
            if now - entry.get("last_access", 0) > SESSION_TTL_SECONDS:
                expired.append(sid)

        for sid in expired:
            del SESSION_CACHE[sid]

    if expired:
        logger.debug("Cleaned up %d expired sessions from cache", len(expired))

    return len(expired)


def _evict_oldest_sessions(count: int) -> None:
    """
    Evict the least recently used sessions. Caller must hold _cache_lock.

    Args:
        count: Number of sessions to evict
    """
    sorted_sessions = sorted(
        SESSION_CACHE.items(),
        key=lambda x: x[1].get("last_access", 0)
    )

    to_remove = sorted_sessions[:max(count, 1)]
    for sid, _ in to_remove:
        del SESSION_CACHE[sid]

    logger.debug("Evicted %d oldest sessions from cache", len(to_remove))


# =============================================================================
# Public Session Management Functions
# =============================================================================

def create_session(engine: UtteranceEngine) -> str:
    """
    Register an engine under a new session id.

    Returns:
        The new session id (UUID4 string)
    """
    session_id = str(uuid.uuid4())

    with _cache_lock:
        if len(SESSION_CACHE) >= SESSION_MAX_CACHE_SIZE:
            _evict_oldest_sessions(SESSION_MAX_CACHE_SIZE // 10)

        SESSION_CACHE[session_id] = {
            "engine": engine,
            "last_access": time.time(),
        }

    return session_id


def get_session(session_id: str) -> Optional[UtteranceEngine]:
    """
    Look up the engine of a session and refresh its last access time.

    Returns:
        The session's engine, or None if the session is unknown or expired.
    """
    # Probabilistic cleanup to avoid dedicated maintenance
    if random.randint(1, 100) == 1:
        _cleanup_expired_sessions()

    with _cache_lock:
        entry = SESSION_CACHE.get(session_id)
        if entry is None:
            return None
        entry["last_access"] = time.time()
        return entry["engine"]


def delete_session(session_id: str) -> bool:
    with _cache_lock:
        return SESSION_CACHE.pop(session_id, None) is not None


def clear_sessions() -> None:
    """Drop every cached session (used by tests and on shutdown)."""
    with _cache_lock:
        SESSION_CACHE.clear()
