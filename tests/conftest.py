import os

# must be set before app.py reads the environment
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-hs256-signing-0001")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")

import pytest

from app import create_app
from careersync.auth import create_token


class FakeMessage:
    def __init__(self, content):
        self.content = content


class FakeLLM:
    def __init__(self, reply):
        self.reply = reply
        self.prompts = []

    def invoke(self, prompt):
        self.prompts.append(prompt)
        if isinstance(self.reply, Exception):
            raise self.reply
        return FakeMessage(self.reply)


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "JWT_SECRET": "test-secret-key-for-hs256-signing-0001",
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_token(app):
    def _make(user_id="google-123", email="jane@example.com"):
        with app.app_context():
            return create_token({"id": user_id, "email": email, "name": "Jane Doe", "picture": None})
    return _make


@pytest.fixture
def auth_headers(make_token):
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def fake_llm(monkeypatch):
    """Call with the text the model should answer; returns the fake."""
    def _install(reply):
        llm = FakeLLM(reply)
        monkeypatch.setattr("careersync.graph.get_llm", lambda *args, **kwargs: llm)
        return llm
    return _install
