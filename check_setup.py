#!/usr/bin/env python3
"""
Jokebox Setup Diagnostic Tool
Checks the jokes file and the optional AI configuration
"""
import os
import sys
from typing import List, Tuple

import settings
from jokes import StoreLoadError, parse_jokes, read_jokes_file


def run_checks(jokes_path: str = None) -> Tuple[List[str], List[str]]:
    """Print a report and return (errors, warnings)."""
    errors: List[str] = []
    warnings: List[str] = []
    jokes_path = jokes_path or settings.JOKES_PATH

    # 1. Jokes file
    print("\n1. Local jokes file:")
    print(f"   Path: {jokes_path}")
    try:
        raw = read_jokes_file(jokes_path)
    except StoreLoadError as e:
        warnings.append(f"Jokes file unusable ({e}) - /api/jokes/random will use JokeAPI")
        print(f"   Jokes file: FAILED ({e})")
    else:
        valid = parse_jokes(raw)
        dropped = len(raw) - len(valid)
        print(f"   Valid jokes: {len(valid)}")
        if dropped:
            warnings.append(f"{dropped} malformed joke(s) will be dropped at start-up")
            print(f"   Dropped entries: {dropped}")
        if not valid:
            warnings.append("No valid local jokes - /api/jokes/random will use JokeAPI")

    # 2. AI provider
    print("\n2. AI joke generation:")
    if not settings.openai_api_key():
        warnings.append("OPENAI_API_KEY not set - /api/jokes/ai will answer 503")
        print("    OPENAI_API_KEY: NOT SET (AI jokes disabled)")
    else:
        print("   OPENAI_API_KEY: Set")
    print(f"   Model: {settings.OPENAI_MODEL}")
    print(f"   Endpoint: {settings.OPENAI_API_URL}")
    print(f"   max_tokens={settings.AI_JOKE_MAX_TOKENS} temperature={settings.AI_JOKE_TEMPERATURE}")

    # 3. Server
    print("\n3. Server Configuration:")
    print(f"   PORT: {settings.PORT}")
    print(f"   APP_ENV: {settings.APP_ENV}")
    if settings.is_test_env():
        warnings.append("APP_ENV=test - app.py will not start a listener")
    if not os.path.isfile(os.path.join(settings.CLIENT_DIR, "index.html")):
        errors.append(f"Front end missing: {settings.CLIENT_DIR}/index.html")
        print("   Front end: MISSING")
    else:
        print("   Front end: OK")

    return errors, warnings


def main() -> int:
    print("=" * 60)
    print("Jokebox Setup Diagnostic Tool")
    print("=" * 60)

    errors, warnings = run_checks()

    print("\n" + "=" * 60)
    print("Summary:")
    print("=" * 60)

    if errors:
        print(f"\n CRITICAL ERRORS ({len(errors)}):")
        for err in errors:
            print(f"   • {err}")
    else:
        print("\n No critical errors found!")

    if warnings:
        print(f"\n  WARNINGS ({len(warnings)}):")
        for warn in warnings:
            print(f"   • {warn}")

    if not errors and not warnings:
        print("\n All systems ready! Start the server with:")
        print("   python app.py")
    elif not errors:
        print("\n  Some features may not work, but Jokebox can still run.")

    print("\n" + "=" * 60)
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
