import json

import pytest
import requests

from jokes import Joke


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            return json.loads(self.text)
        return self._payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def sample_jokes():
    return (
        Joke(type="single", joke="A"),
        Joke(type="twopart", setup="Q", delivery="R"),
    )


@pytest.fixture
def jokes_file(tmp_path):
    def _write(content):
        path = tmp_path / "jokes.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)
    return _write


def assert_joke_shape(data):
    assert data["type"] in {"single", "twopart"}
    if data["type"] == "single":
        assert isinstance(data["joke"], str) and data["joke"]
        assert "setup" not in data and "delivery" not in data
    else:
        assert isinstance(data["setup"], str) and data["setup"]
        assert isinstance(data["delivery"], str) and data["delivery"]
        assert "joke" not in data
