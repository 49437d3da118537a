"""
Detector de Idiomas — HTTP Endpoint Integration Tests
Uses FastAPI TestClient (synchronous HTTPX transport — no running server needed).
Run: pytest tests/test_api_endpoints.py -v
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient

from main import app

client = TestClient(app, raise_server_exceptions=False)


@pytest.fixture(scope="module", autouse=True)
def running_app():
    """Enter the client so the lifespan builds app.state.language_detector."""
    with client:
        yield


# ── Health ────────────────────────────────────────────────────────────────────

class TestHealth:
    def test_health_returns_200(self):
        res = client.get("/health")
        assert res.status_code == 200

    def test_health_has_status_key(self):
        res = client.get("/health")
        data = res.json()
        assert "status" in data


# ── POST /detect/text ─────────────────────────────────────────────────────────

class TestDetectText:
    def test_spanish_text(self):
        res = client.post("/detect/text", json={
            "text": "La programación es una habilidad muy importante en el mundo tecnológico actual."
        })
        assert res.status_code == 200
        data = res.json()
        assert data["language"] == "spanish"
        assert data["confidence"] > 70

    def test_response_has_required_fields(self):
        res = client.post("/detect/text", json={
            "text": "Hello, my name is Peter and I want to travel to Europe to learn about different cultures."
        })
        data = res.json()
        for key in ("language", "confidence", "spanish", "english", "details", "processing_time_ms"):
            assert key in data
        assert data["input_type"] == "text"

    def test_details_has_expected_keys(self):
        res = client.post("/detect/text", json={
            "text": "Hi amigo, ¿how are you doing today? I hope todo está bien."
        })
        details = res.json()["details"]
        assert set(details) == {"spanish_chars", "stop_words", "bigrams", "endings"}

    def test_short_text_is_undetermined_not_422(self):
        res = client.post("/detect/text", json={"text": "Hola"})
        assert res.status_code == 200
        data = res.json()
        assert data["language"] == "undetermined"
        assert data["reason"]

    def test_missing_text_field_returns_422(self):
        res = client.post("/detect/text", json={})
        assert res.status_code == 422

    def test_empty_body_returns_422(self):
        res = client.post("/detect/text")
        assert res.status_code == 422

    def test_oversize_text_returns_422(self, monkeypatch):
        from config import get_settings
        monkeypatch.setattr(get_settings(), "max_text_length", 20)
        res = client.post("/detect/text", json={"text": "a" * 21})
        assert res.status_code == 422


# ── POST /detect/file ─────────────────────────────────────────────────────────

class TestDetectFile:
    def test_utf8_file_is_classified(self):
        content = "Hi amigo, ¿how are you doing today? I hope todo está bien.".encode("utf-8")
        res = client.post("/detect/file", files={"file": ("mix.txt", content, "text/plain")})
        assert res.status_code == 200
        data = res.json()
        assert data["language"] == "mixed"
        assert data["input_type"] == "file"

    def test_non_utf8_file_returns_422(self):
        content = "canción en el año".encode("latin-1")
        res = client.post("/detect/file", files={"file": ("latin1.txt", content, "text/plain")})
        assert res.status_code == 422

    def test_missing_file_returns_422(self):
        res = client.post("/detect/file")
        assert res.status_code == 422


# ── Shared detector ───────────────────────────────────────────────────────────

class TestAppDetector:
    def test_lifespan_builds_detector(self):
        from nlp.language_detector import LanguageDetector
        assert isinstance(app.state.language_detector, LanguageDetector)

    def test_routes_use_app_state_detector(self, monkeypatch):
        from nlp.language_detector import LanguageDetector
        # A threshold of 100 can never be exceeded, so every label becomes "mixed"
        monkeypatch.setattr(app.state, "language_detector", LanguageDetector(threshold=100.0))
        res = client.post("/detect/text", json={
            "text": "La programación es una habilidad muy importante en el mundo tecnológico actual."
        })
        assert res.json()["language"] == "mixed"
