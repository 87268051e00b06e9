"""
Integration tests for the Flask API.

Most tests put a fake AI client behind the service; TestRealSdkClient runs
the real AsyncOpenAI SDK against a local chat-completions server.
"""
import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from adcloner.api import create_app
from adcloner.config import Config
from adcloner.exceptions import ConfigurationError, RemoteCallError
from adcloner.services import ListingAIClient, ListingService


@pytest.fixture
def make_client(fake_ai_client):
    """Build a Flask test client whose AI client returns the given responses."""
    def _make(*responses, error=None):
        ai = fake_ai_client(*responses, error=error)
        app = create_app(service=ListingService(ai))
        app.config["TESTING"] = True
        return app.test_client(), ai
    return _make


class TestAppFactory:
    def test_missing_credential_is_fatal(self, monkeypatch):
        monkeypatch.setattr(Config, "OPENAI_API_KEY", None)

        with pytest.raises(ConfigurationError):
            create_app()

    def test_health(self, make_client):
        client, _ = make_client()
        response = client.get("/health")
        assert response.status_code == 200
        assert response.get_json()["status"] == "healthy"

    def test_index_page(self, make_client):
        client, _ = make_client()
        response = client.get("/")
        assert response.status_code == 200
        assert b"AI Ad Cloner" in response.data


class TestExtractEndpoint:
    def test_success(self, make_client, sample_url, minimal_response):
        client, ai = make_client(minimal_response)

        response = client.post("/api/extract", json={"url": sample_url})

        assert response.status_code == 200
        body = response.get_json()
        assert body["status"] == "success"
        assert body["data"] == minimal_response
        assert sample_url in ai.calls[0]["prompt"]

    @pytest.mark.parametrize("payload", [{}, {"url": ""}, {"url": "   "}, {"url": 42}])
    def test_missing_url(self, make_client, payload):
        client, ai = make_client()

        response = client.post("/api/extract", json=payload)

        assert response.status_code == 400
        assert response.get_json()["status"] == "error"
        assert ai.calls == []

    def test_invalid_url(self, make_client):
        client, ai = make_client()

        response = client.post("/api/extract", json={"url": "not a url"})

        assert response.status_code == 400
        assert ai.calls == []

    def test_model_failure(self, make_client, sample_url):
        client, _ = make_client(error=RemoteCallError("boom"))

        response = client.post("/api/extract", json={"url": sample_url})

        assert response.status_code == 502
        body = response.get_json()
        assert body["status"] == "error"
        assert "Check the URL" in body["message"]
        assert "boom" not in body["message"]

    def test_incomplete_model_response(self, make_client, sample_url):
        client, _ = make_client({"title": "Widget", "description": "A widget."})

        response = client.post("/api/extract", json={"url": sample_url})

        assert response.status_code == 502
        assert "data" not in response.get_json()


class TestOptimizeEndpoint:
    def test_preserves_factual_fields(self, make_client, full_response):
        optimized = {
            "title": "Acme Widget Pro 3000 - Red Heavy Duty Widget",
            "description": "- Strong\n- Red",
            "tags": ["acme", "widget"],
            "imageUrls": [],
            "specifications": [],
        }
        client, _ = make_client(optimized)

        response = client.post("/api/optimize", json={"listing": full_response})

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["title"] == optimized["title"]
        assert data["tags"] == optimized["tags"]
        assert data["price"] == full_response["price"]
        assert data["imageUrls"] == full_response["imageUrls"]
        assert data["specifications"] == full_response["specifications"]

    def test_missing_listing(self, make_client):
        client, ai = make_client()

        response = client.post("/api/optimize", json={})

        assert response.status_code == 400
        assert ai.calls == []

    def test_invalid_listing(self, make_client, minimal_response):
        client, ai = make_client()
        listing = {**minimal_response, "title": ""}

        response = client.post("/api/optimize", json={"listing": listing})

        assert response.status_code == 400
        assert "title" in response.get_json()["message"]
        assert ai.calls == []

    def test_non_json_model_response(self, make_client, full_response):
        client, _ = make_client("not json at all")

        response = client.post("/api/optimize", json={"listing": full_response})

        assert response.status_code == 502
        assert response.get_json()["status"] == "error"


class ChatCompletionsHandler(BaseHTTPRequestHandler):
    """Answers every POST with a fixed chat completion over keep-alive HTTP/1.1."""

    protocol_version = "HTTP/1.1"
    content = ""

    def do_POST(self):
        length = int(self.headers.get("Content-Length", 0))
        self.rfile.read(length)
        body = json.dumps({
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "created": 0,
            "model": "gpt-test",
            "choices": [{
                "index": 0,
                "message": {"role": "assistant", "content": self.content},
                "finish_reason": "stop",
            }],
        }).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def chat_server(minimal_response, monkeypatch):
    """Local OpenAI-compatible server returning ``minimal_response``."""
    for var in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(var, raising=False)
    handler = type("Handler", (ChatCompletionsHandler,), {"content": json.dumps(minimal_response)})
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}/v1"
    server.shutdown()
    server.server_close()


class TestRealSdkClient:
    """The real SDK client across several requests, each on its own event loop."""

    def test_sequential_extracts_all_succeed(self, chat_server, sample_url, minimal_response):
        ai = ListingAIClient(api_key="sk-test", model="gpt-test", base_url=chat_server)
        app = create_app(service=ListingService(ai))
        client = app.test_client()

        responses = [client.post("/api/extract", json={"url": sample_url}) for _ in range(3)]

        assert [r.status_code for r in responses] == [200, 200, 200]
        for response in responses:
            assert response.get_json()["data"] == minimal_response
