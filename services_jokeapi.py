"""JokeAPI (v2.jokeapi.dev) client used when the local store is empty."""
from __future__ import annotations

from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

import settings
from jokes import Joke


class FetchError(RuntimeError):
    """Raised when the external joke API fails or returns an unusable body."""


def normalize_joke(payload: Dict[str, Any]) -> Joke:
    """Map a JokeAPI payload onto the local Joke schema."""
    if not isinstance(payload, dict):
        raise FetchError("JokeAPI response is not a JSON object")
    if payload.get("error"):
        raise FetchError(f"JokeAPI reported an error: {payload.get('message') or 'unknown'}")

    data: Dict[str, Any] = {"category": payload.get("category") or "general"}
    if payload.get("type") == "single":
        data["type"] = "single"
        data["joke"] = payload.get("joke")
    else:
        data["type"] = "twopart"
        data["setup"] = payload.get("setup")
        data["delivery"] = payload.get("delivery")

    try:
        return Joke.model_validate(data)
    except ValidationError as exc:
        raise FetchError(f"JokeAPI returned a malformed joke: {exc.error_count()} error(s)") from exc


def fetch_joke(url: Optional[str] = None, timeout: Optional[float] = None) -> Joke:
    url = url or settings.JOKEAPI_URL
    timeout = settings.JOKEAPI_TIMEOUT if timeout is None else timeout
    try:
        resp = requests.get(url, headers={"Accept": "application/json"}, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"JokeAPI request failed: {exc}") from exc

    if not resp.ok:
        print(f"[jokeapi] Error response ({resp.status_code}): {resp.text[:200]}")
        raise FetchError(f"JokeAPI returned HTTP {resp.status_code}")

    try:
        payload = resp.json()
    except ValueError as exc:
        raise FetchError("JokeAPI response is not valid JSON") from exc

    return normalize_joke(payload)
