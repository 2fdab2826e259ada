# services_ai_jokes.py
"""
AI joke generation for Jokebox.

One chat-completion call per request with a fixed comedian prompt. A missing
credential is reported as ConfigError so the API can answer 503 instead of a
generic 500.
"""

from __future__ import annotations

from typing import Optional

import settings
from jokes import Joke
from llm_openai import LLMError, complete

SYSTEM_PROMPT = (
    "You are a comedian. Generate a short, clean, and funny joke. "
    "Return only the joke text, nothing else."
)
USER_PROMPT = "Tell me a funny joke."


class ConfigError(RuntimeError):
    """Raised when no AI provider credential is configured."""


class GenerationError(RuntimeError):
    """Raised when the provider call fails or produces no text."""


def generate_joke(max_tokens: Optional[int] = None, temperature: Optional[float] = None) -> Joke:
    api_key = settings.openai_api_key()
    if not api_key:
        raise ConfigError("OPENAI_API_KEY is not set")

    messages = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT},
    ]
    try:
        text = complete(
            messages,
            api_key,
            temperature=settings.AI_JOKE_TEMPERATURE if temperature is None else temperature,
            max_tokens=settings.AI_JOKE_MAX_TOKENS if max_tokens is None else max_tokens,
        )
    except LLMError as exc:
        raise GenerationError(str(exc)) from exc

    if not text:
        raise GenerationError("No joke generated")
    return Joke(type="single", joke=text, category="ai-generated")
