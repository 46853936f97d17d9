import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure backend package is importable
backend_root = Path(__file__).resolve().parents[1]
if str(backend_root) not in sys.path:
    sys.path.insert(0, str(backend_root))


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(body)

    def json(self):
        return json.loads(self.text)


def chat_reply(content: str) -> FakeResponse:
    """Wrap assistant text in an OpenAI-style chat completion envelope."""
    return FakeResponse(200, {"choices": [{"message": {"role": "assistant", "content": content}}]})


class FakeAsyncClient:
    """Stand-in for httpx.AsyncClient that records calls and returns a canned response."""

    calls = []
    response = None
    error = None

    def __init__(self, *args, **kwargs):
        self.kwargs = kwargs

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def post(self, url, json=None, headers=None):
        FakeAsyncClient.calls.append({"url": url, "json": json, "headers": headers})
        if FakeAsyncClient.error is not None:
            raise FakeAsyncClient.error
        return FakeAsyncClient.response


@pytest.fixture
def fake_http(monkeypatch):
    """Patch httpx.AsyncClient inside the enhancer; set .response or .error per test."""
    from resume_builder import enhancer

    FakeAsyncClient.calls = []
    FakeAsyncClient.response = None
    FakeAsyncClient.error = None
    monkeypatch.setattr(enhancer.httpx, "AsyncClient", FakeAsyncClient)
    return FakeAsyncClient


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("DEEPSEEK_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def client(monkeypatch):
    """Provide a FastAPI TestClient with an isolated session registry."""
    monkeypatch.setenv("CORS_ORIGINS", "*")
    monkeypatch.setenv("ENHANCER_PROVIDER", "deepseek")
    # Avoid accidental usage of real API keys during tests
    monkeypatch.setenv("DEEPSEEK_API_KEY", "")
    monkeypatch.setenv("OPENAI_API_KEY", "")

    from resume_builder import session
    from resume_builder.main import app

    registry = session.SessionRegistry()
    app.dependency_overrides[session.get_sessions] = lambda: registry
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep a developer's shell or .env settings out of the tests."""
    for name in ("ENHANCER_PROVIDER", "ENHANCER_MODEL", "ENHANCER_BASE_URL",
                 "ENHANCER_TIMEOUT", "ENHANCER_SYSTEM_PROMPT",
                 "DEEPSEEK_API_KEY", "OPENAI_API_KEY"):
        monkeypatch.delenv(name, raising=False)
