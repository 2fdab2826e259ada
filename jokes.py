# jokes.py
"""
Joke model plus the local joke store for Jokebox.

The store is a JSON array of jokes read once at start-up. A missing or broken
file never stops the server: it is logged and the collection is simply empty,
which makes the random endpoint fall back to the external API.
"""

from __future__ import annotations

import json
import os
import random
from typing import Any, Iterable, List, Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, ValidationError, model_validator

import settings


class StoreLoadError(RuntimeError):
    """Raised when the jokes file is missing, unreadable or not a JSON array."""


class Joke(BaseModel):
    type: Literal["single", "twopart"] = Field(..., description="single or twopart")
    joke: Optional[str] = Field(default=None, description="Joke text (single only)")
    setup: Optional[str] = Field(default=None, description="Setup line (twopart only)")
    delivery: Optional[str] = Field(default=None, description="Punchline (twopart only)")
    category: Optional[str] = Field(default=None, description="Category label")

    @model_validator(mode="after")
    def _check_shape(self) -> "Joke":
        if self.type == "single":
            if not (self.joke or "").strip():
                raise ValueError("single joke needs non-empty 'joke'")
            if self.setup is not None or self.delivery is not None:
                raise ValueError("single joke must not carry setup/delivery")
        else:
            if not (self.setup or "").strip() or not (self.delivery or "").strip():
                raise ValueError("twopart joke needs non-empty 'setup' and 'delivery'")
            if self.joke is not None:
                raise ValueError("twopart joke must not carry 'joke'")
        return self

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)


def read_jokes_file(path: str) -> List[Any]:
    """Return the raw JSON array stored at `path`."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError as exc:
        raise StoreLoadError(f"jokes file not found: {path}") from exc
    except (OSError, ValueError) as exc:
        raise StoreLoadError(f"could not read {path}: {exc}") from exc
    if not isinstance(data, list):
        raise StoreLoadError(f"{path} must contain a JSON array, got {type(data).__name__}")
    return data


def parse_jokes(entries: Iterable[Any]) -> Tuple[Joke, ...]:
    """Validate raw entries, dropping (and logging) the malformed ones."""
    valid: List[Joke] = []
    for idx, entry in enumerate(entries):
        try:
            valid.append(Joke.model_validate(entry))
        except ValidationError as exc:
            reason = exc.errors()[0].get("msg", "invalid") if exc.errors() else "invalid"
            print(f"[jokes] Dropping entry #{idx}: {reason}")
    return tuple(valid)


def load_jokes(path: Optional[str] = None) -> Tuple[Joke, ...]:
    """Load the joke snapshot. Never raises; returns () on failure."""
    path = path or settings.JOKES_PATH
    try:
        raw = read_jokes_file(path)
    except StoreLoadError as exc:
        print(f"[jokes] Error loading jokes: {exc}")
        return ()
    jokes = parse_jokes(raw)
    print(f"[jokes] Loaded {len(jokes)} joke(s) from {os.path.basename(path)}")
    return jokes


def pick_joke(collection: Sequence[Joke], rng=random) -> Joke:
    """Uniform random pick; raises IndexError on an empty collection."""
    if not collection:
        raise IndexError("cannot pick from an empty joke collection")
    return rng.choice(collection)
