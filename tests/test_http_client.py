"""Tests for retry and backoff behaviour of the page fetcher."""

import sys
from pathlib import Path

import pytest
import requests

# Ensure the repository's src/ directory is importable without installation.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from tldr.core import http_client  # noqa: E402
from tldr.core.http_client import RetryableHTTPClient  # noqa: E402


class FakeResponse:
    def __init__(self, status_code, headers=None, text=""):
        self.status_code = status_code
        self.headers = headers or {}
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")


@pytest.fixture
def sleeps(monkeypatch):
    recorded = []
    monkeypatch.setattr(http_client.time, "sleep", recorded.append)
    return recorded


def _client_with(monkeypatch, outcomes, **kwargs):
    client = RetryableHTTPClient(rps=100.0, **kwargs)
    calls = []

    def fake_get(url, headers=None, timeout=None):
        calls.append(url)
        outcome = outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr(client.session, "get", fake_get)
    return client, calls


def test_success_returns_response(monkeypatch, sleeps):
    client, calls = _client_with(monkeypatch, [FakeResponse(200, text="<p>ok</p>")])
    response = client.get_with_retry("http://example.com/")
    assert response.text == "<p>ok</p>"
    assert calls == ["http://example.com/"]


def test_not_found_returns_none(monkeypatch, sleeps):
    client, _ = _client_with(monkeypatch, [FakeResponse(404)])
    assert client.get_with_retry("http://example.com/missing") is None


def test_server_errors_are_retried_honouring_retry_after(monkeypatch, sleeps):
    outcomes = [FakeResponse(503, headers={"Retry-After": "3"}), FakeResponse(200)]
    client, calls = _client_with(monkeypatch, outcomes)
    assert client.get_with_retry("http://example.com/").status_code == 200
    assert len(calls) == 2
    assert 3.0 in sleeps


def test_network_errors_reraise_after_last_attempt(monkeypatch, sleeps):
    outcomes = [requests.ConnectionError("down")] * 2
    client, calls = _client_with(monkeypatch, outcomes, max_retries=2)
    with pytest.raises(requests.ConnectionError):
        client.get_with_retry("http://example.com/")
    assert len(calls) == 2


def test_client_errors_are_not_retried(monkeypatch, sleeps):
    client, calls = _client_with(monkeypatch, [FakeResponse(403)])
    with pytest.raises(requests.HTTPError):
        client.get_with_retry("http://example.com/")
    assert len(calls) == 1


def test_user_agent_header_is_set():
    with RetryableHTTPClient(user_agent="tldr-test/1.0") as client:
        assert client.session.headers["User-Agent"] == "tldr-test/1.0"
