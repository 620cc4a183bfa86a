"""
Tests for the /nlu HTTP endpoints.
"""
from voice_nlu.config import MAX_TRANSCRIPT_LENGTH


def _create_session(client, **body):
    resp = client.post("/nlu/sessions", json=body)
    assert resp.status_code == 201
    return resp.json()["session_id"]


class TestSessions:

    def test_create_session_defaults(self, client):
        resp = client.post("/nlu/sessions", json={})
        assert resp.status_code == 201
        data = resp.json()
        assert data["session_id"]
        assert data["variant"] == "en-US"
        assert data["context"] == "restaurant"

    def test_create_session_with_variant(self, client):
        resp = client.post("/nlu/sessions", json={"variant": "fr_ch", "context": "food"})
        assert resp.status_code == 201
        assert resp.json()["variant"] == "fr-CH"
        assert resp.json()["context"] == "food"

    def test_unsupported_variant_is_400(self, client):
        resp = client.post("/nlu/sessions", json={"variant": "xx-YY"})
        assert resp.status_code == 400

    def test_unknown_option_is_422(self, client):
        resp = client.post("/nlu/sessions", json={"options": {"bogus": True}})
        assert resp.status_code == 422

    def test_delete_session(self, client):
        session_id = _create_session(client)
        assert client.delete(f"/nlu/sessions/{session_id}").status_code == 204
        assert client.delete(f"/nlu/sessions/{session_id}").status_code == 404


class TestProcess:

    def test_process(self, client):
        session_id = _create_session(client)
        resp = client.post("/nlu/process", json={
            "session_id": session_id,
            "text": "I'd like a cheeseburger and fries please",
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["canonical_text"] == "I would like a cheeseburger and french fries please"
        assert data["classification"]["intent"] == "order"
        assert [f["canonical_name"] for f in data["entities"]["foods"]] == [
            "cheeseburger", "french fries",
        ]

    def test_unknown_session_is_404(self, client):
        resp = client.post("/nlu/process", json={"session_id": "nope", "text": "hi"})
        assert resp.status_code == 404

    def test_transcript_too_long_is_422(self, client):
        session_id = _create_session(client)
        resp = client.post("/nlu/process", json={
            "session_id": session_id,
            "text": "a" * (MAX_TRANSCRIPT_LENGTH + 1),
        })
        assert resp.status_code == 422

    def test_sessions_are_isolated(self, client):
        first = _create_session(client)
        second = _create_session(client)
        client.post(f"/nlu/sessions/{first}/vocabulary", json={"term": "xyz", "replacement": "Canonical"})

        resp = client.post("/nlu/process", json={"session_id": second, "text": "xyz"})
        assert resp.json()["canonical_text"] == "Xyz"


class TestSessionSettings:

    def test_switch_variant(self, client):
        session_id = _create_session(client)
        resp = client.put(f"/nlu/sessions/{session_id}/variant", json={"variant": "fr-CH"})
        assert resp.status_code == 200
        assert resp.json()["variant"] == "fr-CH"

        resp = client.post("/nlu/process", json={
            "session_id": session_id,
            "text": "je voudrais septante grammes de fromage",
        })
        assert resp.json()["canonical_text"] == "Je voudrais 70 grammes de fromage"

    def test_switch_to_unknown_variant_is_400(self, client):
        session_id = _create_session(client)
        resp = client.put(f"/nlu/sessions/{session_id}/variant", json={"variant": "xx-YY"})
        assert resp.status_code == 400

    def test_clear_and_set_context(self, client):
        session_id = _create_session(client)
        resp = client.put(f"/nlu/sessions/{session_id}/context", json={"context": None})
        assert resp.status_code == 200
        assert resp.json()["context"] is None

        resp = client.put(f"/nlu/sessions/{session_id}/context", json={"context": "restaurant"})
        assert resp.json()["context"] == "restaurant"

    def test_invalid_context_is_422(self, client):
        session_id = _create_session(client)
        resp = client.put(f"/nlu/sessions/{session_id}/context", json={"context": "bank"})
        assert resp.status_code == 422


class TestVocabulary:

    def test_add_list_remove(self, client):
        session_id = _create_session(client)
        url = f"/nlu/sessions/{session_id}/vocabulary"

        resp = client.post(url, json={"term": "xyz", "replacement": "Canonical"})
        assert resp.status_code == 201

        resp = client.get(url)
        assert resp.status_code == 200
        assert [e["term"] for e in resp.json()] == ["xyz"]

        assert client.delete(f"{url}/xyz").status_code == 204
        assert client.delete(f"{url}/xyz").status_code == 404
        assert client.get(url).json() == []

    def test_invalid_entry_is_400(self, client):
        session_id = _create_session(client)
        resp = client.post(
            f"/nlu/sessions/{session_id}/vocabulary",
            json={"term": "   ", "replacement": "x"},
        )
        assert resp.status_code == 400


class TestStatisticsAndConfiguration:

    def test_statistics(self, client):
        session_id = _create_session(client)
        client.post("/nlu/process", json={"session_id": session_id, "text": "can i get chips"})

        resp = client.get(f"/nlu/sessions/{session_id}/statistics")
        assert resp.status_code == 200
        assert resp.json()["total_processed"] == 1

        assert client.delete(f"/nlu/sessions/{session_id}/statistics").status_code == 204
        assert client.get(f"/nlu/sessions/{session_id}/statistics").json()["total_processed"] == 0

    def test_configuration_round_trip(self, client):
        source = _create_session(client, variant="de-AT")
        client.post(f"/nlu/sessions/{source}/vocabulary", json={"term": "xyz", "replacement": "Canonical"})
        exported = client.get(f"/nlu/sessions/{source}/configuration").json()
        assert exported["variant"] == "de-AT"

        target = _create_session(client)
        resp = client.put(f"/nlu/sessions/{target}/configuration", json=exported)
        assert resp.status_code == 200
        assert resp.json()["variant"] == "de-AT"
        assert client.get(f"/nlu/sessions/{target}/configuration").json() == exported

    def test_invalid_configuration_is_400(self, client):
        session_id = _create_session(client)
        resp = client.put(f"/nlu/sessions/{session_id}/configuration", json={"variant": "xx-YY"})
        assert resp.status_code == 400

    def test_unknown_session_is_404(self, client):
        assert client.get("/nlu/sessions/nope/statistics").status_code == 404
        assert client.get("/nlu/sessions/nope/configuration").status_code == 404


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert "fr-CH" in data["variants"]
