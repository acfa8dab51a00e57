"""Smoke tests for the FastAPI control surface."""

import pytest
from fastapi.testclient import TestClient

import app.src.main as web
from scene_animator.authoring import ContentAnalysis


class FakeProvider:
    def analyze(self, text):
        return ContentAnalysis(title="Orbits")

    def design(self, analysis):
        return {
            "elements": [
                {"type": "circle", "content": "Sun", "position": {"x": 600, "y": 400}, "size": 60}
            ]
        }


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv("CLAUDE_API_KEY", raising=False)
    with TestClient(web.app) as test_client:
        yield test_client


def test_state(client):
    """Should report the demo scene, stopped at zero."""
    response = client.get("/api/player")

    assert response.status_code == 200
    body = response.json()
    assert body["elapsed_ms"] == 0
    assert body["is_playing"] is False
    assert body["scene"]["template"] == "presentation"
    assert body["markers"][0]["time"] == 0


def test_seek_is_clamped(client):
    duration = client.get("/api/player").json()["scene"]["total_duration_ms"]

    response = client.post("/api/player/seek", json={"elapsed_ms": 1e9})

    assert response.status_code == 200
    assert response.json()["elapsed_ms"] == duration


def test_seek_needs_exactly_one_target(client):
    response = client.post("/api/player/seek", json={"elapsed_ms": 10, "percent": 5})

    assert response.status_code == 400


def test_unsupported_speed(client):
    """Should answer 400 with the valid choices."""
    response = client.post("/api/player/speed", json={"speed": 3})

    assert response.status_code == 400
    assert "Unsupported speed" in response.json()["detail"]


def test_bad_scene_index(client):
    response = client.post("/api/player/scene", json={"index": 9})

    assert response.status_code == 400


def test_bad_color_rejected_before_install(client):
    before = client.get("/api/player").json()["scene"]["name"]

    response = client.post(
        "/api/scenes/text", json={"text": "Title\nA", "style": {"color": "banana"}}
    )

    assert response.status_code == 400
    assert client.get("/api/player").json()["scene"]["name"] == before


def test_load_text(client):
    response = client.post("/api/scenes/text", json={"text": "History\n1900", "template": "timeline"})

    assert response.status_code == 200
    assert response.json()["scene"]["template"] == "timeline"


def test_generate_without_api_key(client):
    """Collaborator failures map to 502."""
    response = client.post("/api/scenes/generate", json={"text": "anything"})

    assert response.status_code == 502
    assert "CLAUDE_API_KEY" in response.json()["detail"]


def test_design_endpoint(client):
    web._player.analysis_provider = FakeProvider()

    response = client.post("/api/scenes/design", json={"text": "The solar system"})

    assert response.status_code == 200
    assert response.json()["state"]["scene"]["template"] == "design"
    assert response.json()["scene"] == "Orbits"


def test_frame_png(client):
    response = client.get("/api/frame.png")

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")
