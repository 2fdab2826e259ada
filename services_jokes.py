"""Per-request joke dispatch: local snapshot, external API, or AI generation."""
from __future__ import annotations

import random
from typing import Callable, Iterable, Tuple

from jokes import Joke, pick_joke
from services_ai_jokes import generate_joke
from services_jokeapi import fetch_joke

SOURCE_LOCAL = "local"
SOURCE_EXTERNAL = "external"
SOURCE_AI = "ai"


class JokeService:
    """Holds the immutable joke snapshot and the outbound providers."""

    def __init__(
        self,
        jokes: Iterable[Joke] = (),
        *,
        fetcher: Callable[[], Joke] = fetch_joke,
        generator: Callable[[], Joke] = generate_joke,
        rng=random,
    ) -> None:
        self._jokes: Tuple[Joke, ...] = tuple(jokes)
        self._fetcher = fetcher
        self._generator = generator
        self._rng = rng

    @property
    def jokes(self) -> Tuple[Joke, ...]:
        return self._jokes

    def random_joke(self) -> Tuple[str, Joke]:
        """Local pick when the snapshot has jokes, otherwise the external API.

        FetchError from the external API propagates to the caller.
        """
        if self._jokes:
            return SOURCE_LOCAL, pick_joke(self._jokes, self._rng)
        return SOURCE_EXTERNAL, self._fetcher()

    def all_jokes(self) -> Tuple[Joke, ...]:
        return self._jokes

    def ai_joke(self) -> Tuple[str, Joke]:
        return SOURCE_AI, self._generator()
