import requests

import settings


class LLMError(RuntimeError):
    """Raised when the chat-completion provider call fails."""


def complete(messages, api_key, temperature=0.8, max_tokens=100, model=None, url=None, timeout=None):
    headers = {"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"}
    payload = {
        "model": model or settings.OPENAI_MODEL,
        "messages": messages,
        "max_tokens": max_tokens,
        "temperature": temperature,
    }
    try:
        r = requests.post(
            url or settings.OPENAI_API_URL,
            headers=headers,
            json=payload,
            timeout=settings.OPENAI_TIMEOUT if timeout is None else timeout,
        )
        r.raise_for_status()
        data = r.json()
    except requests.RequestException as exc:
        raise LLMError(f"chat completion request failed: {exc}") from exc
    except ValueError as exc:
        raise LLMError("chat completion response is not valid JSON") from exc

    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as exc:
        raise LLMError("chat completion response has no choices") from exc
    return content.strip() if isinstance(content, str) else ""
