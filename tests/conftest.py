import pytest
from fastapi.testclient import TestClient

from voice_nlu import UtteranceEngine, initialize
from voice_nlu.main import app
from voice_nlu.services.session import clear_sessions


@pytest.fixture
def client():
    """Shared FastAPI TestClient over a fresh session cache."""
    clear_sessions()
    with TestClient(app) as test_client:
        yield test_client
    clear_sessions()


@pytest.fixture
def en_us():
    """American English engine in restaurant context."""
    return initialize("en-US")


@pytest.fixture
def en_gb():
    return initialize("en-GB")


@pytest.fixture
def fr_fr():
    return initialize("fr-FR")


@pytest.fixture
def fr_ch():
    return initialize("fr-CH")


@pytest.fixture
def de_de():
    return initialize("de-DE")


@pytest.fixture
def plain_engine():
    """American English engine without a conversation context."""
    return UtteranceEngine("en-US")


@pytest.fixture
def it_it():
    return initialize("it-IT")
