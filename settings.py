# settings.py
"""
Environment configuration for Jokebox.
Values are read once at import; `.env` is loaded first if present.
"""
import os

from dotenv import load_dotenv

load_dotenv()

HERE = os.path.dirname(os.path.abspath(__file__))


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except Exception:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except Exception:
        return default


PORT = _env_int("PORT", 3000)
HOST = os.getenv("HOST", "0.0.0.0")
APP_ENV = (os.getenv("APP_ENV") or "development").strip().lower()

JOKES_PATH = os.getenv("JOKES_PATH") or os.path.join(HERE, "data", "jokes.json")
CLIENT_DIR = os.getenv("CLIENT_DIR") or os.path.join(HERE, "client")

JOKEAPI_URL = os.getenv("JOKEAPI_URL", "https://v2.jokeapi.dev/joke/Any?safe-mode")
JOKEAPI_TIMEOUT = _env_float("JOKEAPI_TIMEOUT", 10.0)

OPENAI_API_URL = os.getenv("OPENAI_API_URL", "https://api.openai.com/v1/chat/completions")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")
OPENAI_TIMEOUT = _env_float("OPENAI_TIMEOUT", 30.0)

AI_JOKE_MAX_TOKENS = _env_int("AI_JOKE_MAX_TOKENS", 100)
AI_JOKE_TEMPERATURE = _env_float("AI_JOKE_TEMPERATURE", 0.8)


def openai_api_key() -> str:
    """Read the AI credential at call time so tests and restarts see changes."""
    return (os.getenv("OPENAI_API_KEY") or "").strip()


def is_test_env() -> bool:
    return APP_ENV == "test"
