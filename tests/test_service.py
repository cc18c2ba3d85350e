import pytest
from fastapi.testclient import TestClient

from main import create_app
from summarization.service import get_llm_client
from tests.test_llm_client import FakeResponse, FakeSession, make_client


@pytest.fixture
def make_test_client():
    def _make(llm_client=None):
        app = create_app()
        app.dependency_overrides[get_llm_client] = lambda: llm_client
        return TestClient(app)
    return _make


def test_root(make_test_client):
    response = make_test_client().get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["endpoints"]["summarize"] == "/api/summarize (POST)"


def test_health_without_gemini(make_test_client):
    response = make_test_client().get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["gemini_available"] is False
    assert body["backend"] is None
    assert body["system"]["uptime_seconds"] >= 0


def test_health_with_gemini(make_test_client, ok_client):
    body = make_test_client(ok_client).get("/api/health").json()
    assert body["gemini_available"] is True
    assert body["backend"]["backend"] == "gemini"


def test_summarize_tfidf(make_test_client, five_sentence_text):
    response = make_test_client().post(
        "/api/summarize",
        json={"text": five_sentence_text, "method": "tfidf", "num_sentences": 2, "request_id": "req-1"}
    )
    assert response.status_code == 200
    assert response.json() == {
        "request_id": "req-1",
        "summary": "The river, the river, the river feeds every field. Fishermen love the river.",
        "method": "tfidf",
    }


def test_summarize_defaults(make_test_client):
    response = make_test_client().post("/api/summarize", json={"text": "hello world"})
    assert response.status_code == 200
    body = response.json()
    assert body["summary"] == "hello world"
    assert body["method"] == "tfidf"
    assert body["request_id"]


def test_summarize_gemini(make_test_client, ok_client, five_sentence_text):
    response = make_test_client(ok_client).post(
        "/api/summarize", json={"text": five_sentence_text, "method": "gemini"}
    )
    assert response.status_code == 200
    assert response.json()["method"] == "gemini"
    assert response.json()["summary"] == "Gemini summary."


def test_summarize_gemini_fallback(make_test_client, failing_client, five_sentence_text):
    response = make_test_client(failing_client).post(
        "/api/summarize", json={"text": five_sentence_text, "method": "gemini"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["method"] == "tfidf"
    assert body["note"] == "Fell back to alternative method due to Gemini API error"


def test_summarize_malformed_gemini_reply_falls_back(make_test_client, five_sentence_text):
    client = make_client(FakeSession(FakeResponse(body="<html>bad gateway</html>")))
    response = make_test_client(client).post(
        "/api/summarize", json={"text": five_sentence_text, "method": "auto"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["method"] == "tfidf"
    assert body["note"] == "Fell back to alternative method due to Gemini API error"


@pytest.mark.parametrize("payload", [{}, {"method": "auto"}, {"text": 5}, {"text": "x", "method": "bert"}])
def test_summarize_invalid_body(make_test_client, payload):
    response = make_test_client().post("/api/summarize", json=payload)
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid request body"
    assert body["example"]["text"] == "Your text to summarize"


def test_summarize_malformed_json(make_test_client):
    response = make_test_client().post(
        "/api/summarize", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400


def test_summarize_blank_text(make_test_client):
    response = make_test_client().post("/api/summarize", json={"text": "   "})
    assert response.status_code == 400
    assert "text is required" in response.json()["details"]


def test_summarize_zero_sentences(make_test_client):
    response = make_test_client().post("/api/summarize", json={"text": "One. Two.", "num_sentences": 0})
    assert response.status_code == 400
    assert "num_sentences" in response.json()["details"]


def test_unknown_route(make_test_client):
    response = make_test_client().get("/api/nope")
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "Not Found"
    assert body["path"] == "/api/nope"
    assert body["method"] == "GET"
    assert "summarize" in body["available_endpoints"]


def test_cors_preflight(make_test_client):
    response = make_test_client().options(
        "/api/summarize",
        headers={
            "Origin": "https://example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        }
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-credentials"] == "true"
    assert "POST" in response.headers["access-control-allow-methods"]


def test_lifespan_builds_and_closes_client():
    from core import GeminiClient, LLMConfig

    app = create_app(LLMConfig(api_key="abc"))
    with TestClient(app) as client:
        assert isinstance(app.state.llm_client, GeminiClient)
        assert client.get("/api/health").json()["gemini_available"] is True
