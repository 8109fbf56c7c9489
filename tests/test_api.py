import pytest
from fastapi.testclient import TestClient

from stepper.app.dependencies import get_troubleshooting_service
from stepper.app.main import app


@pytest.fixture
def client(service):
    app.dependency_overrides[get_troubleshooting_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def _new_session(client):
    response = client.post("/sessions")
    assert response.status_code == 201
    return response.json()["session_id"]


def test_search_endpoint(client):
    response = client.get("/articles/search", params={"q": "gmail email not sending"})

    assert response.status_code == 200
    body = response.json()
    assert [card["id"] for card in body["results"]] == ["1", "2"]
    assert body["results"][0]["score"] == 10
    assert body["low_confidence"] is False


def test_session_lifecycle(client):
    session_id = _new_session(client)

    idle = client.get(f"/sessions/{session_id}").json()
    assert idle["status"] == "IDLE"
    assert idle["total_steps"] == 0

    start = client.post(f"/sessions/{session_id}/article", json={"article_id": "6"})
    assert start.status_code == 200
    assert start.json()["current_step"]["id"] == "step1"

    for _ in range(3):
        last = client.post(f"/sessions/{session_id}/continue").json()
    assert last["completed"] is True

    done = client.get(f"/sessions/{session_id}").json()
    assert done["status"] == "COMPLETE"
    assert done["completed_step_ids"] == ["step1", "step2", "step3"]

    summary = client.get(f"/sessions/{session_id}/summary").json()
    assert summary["completed_steps"] == ["step1", "step2", "step3"]

    assert client.delete(f"/sessions/{session_id}").status_code == 204
    assert client.get(f"/sessions/{session_id}").status_code == 404


def test_back_at_first_step_is_not_an_error(client):
    session_id = _new_session(client)
    client.post(f"/sessions/{session_id}/article", json={"article_id": "1"})

    response = client.post(f"/sessions/{session_id}/back")

    assert response.status_code == 200
    assert response.json()["success"] is False


def test_failure_endpoint_switches_path(client):
    session_id = _new_session(client)
    client.post(f"/sessions/{session_id}/article", json={"article_id": "2"})

    response = client.post(
        f"/sessions/{session_id}/failures",
        json={"reason_category": "system-error", "note": "mailbox is full"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "same-article"
    assert body["fallback"]["id"] == "fallback1"

    session = client.get(f"/sessions/{session_id}").json()
    assert session["active_path"] == "fallback1"
    assert session["status"] == "ACTIVE"


def test_failure_endpoint_rejects_unknown_reason(client):
    session_id = _new_session(client)
    client.post(f"/sessions/{session_id}/article", json={"article_id": "2"})

    response = client.post(f"/sessions/{session_id}/failures", json={"reason_category": "gremlins"})

    assert response.status_code == 422


def test_reset_endpoint(client):
    session_id = _new_session(client)
    client.post(f"/sessions/{session_id}/article", json={"article_id": "3"})
    client.post(f"/sessions/{session_id}/continue")

    assert client.post(f"/sessions/{session_id}/reset").status_code == 204

    session = client.get(f"/sessions/{session_id}").json()
    assert session["status"] == "IDLE"
    assert session["completed_step_ids"] == []


def test_error_mapping(client):
    assert client.post("/sessions/missing/continue").status_code == 404

    session_id = _new_session(client)
    assert client.post(f"/sessions/{session_id}/article", json={"article_id": "999"}).status_code == 404
    assert client.post(f"/sessions/{session_id}/continue").status_code == 409
