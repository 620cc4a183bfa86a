"""
Tests for the in-memory session engine cache.
"""
import time

import pytest

import voice_nlu.services.session as session_mod
from voice_nlu import UtteranceEngine
from voice_nlu.services.session import (
    SESSION_CACHE,
    _cleanup_expired_sessions,
    clear_sessions,
    create_session,
    delete_session,
    get_session,
)


@pytest.fixture(autouse=True)
def empty_cache():
    clear_sessions()
    yield
    clear_sessions()


def test_create_and_get():
    engine = UtteranceEngine("en-GB")
    session_id = create_session(engine)
    assert get_session(session_id) is engine
    assert get_session("unknown") is None


def test_delete():
    session_id = create_session(UtteranceEngine())
    assert delete_session(session_id) is True
    assert delete_session(session_id) is False
    assert get_session(session_id) is None


def test_expired_sessions_are_cleaned_up():
    session_id = create_session(UtteranceEngine())
    SESSION_CACHE[session_id]["last_access"] = time.time() - session_mod.SESSION_TTL_SECONDS - 1
    fresh_id = create_session(UtteranceEngine())

    assert _cleanup_expired_sessions() == 1
    assert session_id not in SESSION_CACHE
    assert fresh_id in SESSION_CACHE


def test_oldest_sessions_are_evicted(monkeypatch):
    monkeypatch.setattr(session_mod, "SESSION_MAX_CACHE_SIZE", 3)
    ids = [create_session(UtteranceEngine()) for _ in range(3)]
    for offset, session_id in enumerate(ids):
        SESSION_CACHE[session_id]["last_access"] = 1000.0 + offset

    newest = create_session(UtteranceEngine())

    assert ids[0] not in SESSION_CACHE
    assert ids[1] in SESSION_CACHE
    assert newest in SESSION_CACHE
    assert len(SESSION_CACHE) == 3
