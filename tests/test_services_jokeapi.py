import pytest
import requests

import services_jokeapi
from services_jokeapi import FetchError, fetch_joke, normalize_joke
from tests.conftest import FakeResponse


@pytest.fixture
def fake_get(monkeypatch):
    calls = []

    def _install(response=None, exc=None):
        def _get(url, **kwargs):
            calls.append((url, kwargs))
            if exc is not None:
                raise exc
            return response
        monkeypatch.setattr(services_jokeapi.requests, "get", _get)
        return calls

    return _install


def test_fetch_single_joke(fake_get):
    calls = fake_get(FakeResponse(200, {"type": "single", "joke": "A", "category": "Programming"}))
    joke = fetch_joke()
    assert joke.to_dict() == {"type": "single", "joke": "A", "category": "Programming"}
    url, kwargs = calls[0]
    assert "safe-mode" in url
    assert kwargs["timeout"] > 0


def test_fetch_twopart_defaults_category(fake_get):
    fake_get(FakeResponse(200, {"type": "twopart", "setup": "Q", "delivery": "R"}))
    assert fetch_joke().to_dict() == {"type": "twopart", "setup": "Q", "delivery": "R", "category": "general"}


def test_unknown_provider_type_becomes_twopart():
    joke = normalize_joke({"type": "riddle", "setup": "Q", "delivery": "R", "joke": "ignored"})
    assert joke.type == "twopart"
    assert joke.joke is None


def test_non_success_status_raises(fake_get):
    fake_get(FakeResponse(503, text="down"))
    with pytest.raises(FetchError):
        fetch_joke()


@pytest.mark.parametrize("exc", [requests.ConnectionError("boom"), requests.Timeout("slow")])
def test_transport_failure_raises(fake_get, exc):
    fake_get(exc=exc)
    with pytest.raises(FetchError):
        fetch_joke()


def test_invalid_json_raises(fake_get):
    fake_get(FakeResponse(200, text="<html>oops</html>"))
    with pytest.raises(FetchError):
        fetch_joke()


def test_provider_error_body_raises(fake_get):
    fake_get(FakeResponse(200, {"error": True, "message": "No matching joke found"}))
    with pytest.raises(FetchError):
        fetch_joke()


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "single"},
        {"type": "twopart", "setup": "Q"},
        ["not", "an", "object"],
    ],
)
def test_malformed_payload_raises(fake_get, payload):
    fake_get(FakeResponse(200, payload))
    with pytest.raises(FetchError):
        fetch_joke()
