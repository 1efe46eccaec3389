"""Shared fixtures for Eisaku test suite."""
import httpx
import pytest
from fastapi.testclient import TestClient

import translator
import feeds


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Tests never see real API keys."""
    monkeypatch.delenv("DEEPL_API_KEY", raising=False)
    monkeypatch.delenv("DEEPL_API_URL", raising=False)
    monkeypatch.delenv("NEWS_API_KEY", raising=False)


@pytest.fixture()
def client():
    from backend import app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def mock_upstream(monkeypatch):
    """Route feed and DeepL HTTP traffic through a handler: install(handler)."""
    def _install(handler):
        transport = httpx.MockTransport(handler)
        monkeypatch.setattr(feeds, "_client", lambda: httpx.AsyncClient(transport=transport, follow_redirects=True))
        monkeypatch.setattr(translator, "_client", lambda: httpx.AsyncClient(transport=transport))
    return _install
