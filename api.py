# api.py
"""
FastAPI application for Jokebox.
Serves random jokes from the local snapshot, JokeAPI, or an AI provider,
plus the single-page front end.
"""
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse

import settings
from services_ai_jokes import ConfigError, GenerationError
from services_jokeapi import FetchError
from services_jokes import JokeService
from time_utils import iso_timestamp, uptime_seconds

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def create_app(service: JokeService, client_dir: Optional[str] = None) -> FastAPI:
    """Build the app around an explicitly constructed JokeService."""
    app = FastAPI(
        title="Jokebox API",
        description="Random jokes from a local collection, JokeAPI, or an AI provider",
        version="1.0.0",
    )
    app.state.jokes = service
    index_path = os.path.join(client_dir or settings.CLIENT_DIR, "index.html")

    # ========== Error Handling ==========

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        print(f"[api] Unhandled error on {request.method} {request.url.path}: {exc!r}")
        return _error(500, "Internal server error")

    # ========== Joke Endpoints ==========

    @app.get("/api/jokes/random")
    def random_joke():
        """Random joke: local snapshot first, JokeAPI when it is empty"""
        try:
            source, joke = service.random_joke()
        except FetchError as e:
            print(f"[api] Error fetching joke: {e}")
            return _error(500, "Unable to fetch joke. Please try again later.")
        except Exception as e:
            print(f"[api] Error fetching joke: {e!r}")
            return _error(500, "Unable to fetch joke. Please try again later.")
        return {"success": True, "source": source, "data": joke.to_dict()}

    @app.get("/api/jokes/all")
    def all_jokes():
        """Every joke in the local snapshot"""
        try:
            jokes = service.all_jokes()
            return {
                "success": True,
                "count": len(jokes),
                "data": [j.to_dict() for j in jokes],
            }
        except Exception as e:
            print(f"[api] Error listing jokes: {e!r}")
            return _error(500, "Unable to retrieve jokes")

    @app.post("/api/jokes/ai")
    def ai_joke():
        """Generate a joke with the configured AI provider"""
        try:
            source, joke = service.ai_joke()
        except ConfigError as e:
            print(f"[api] AI joke unavailable: {e}")
            return _error(503, "AI joke generation is not configured")
        except GenerationError as e:
            print(f"[api] Error generating AI joke: {e}")
            return _error(500, "Unable to generate AI joke")
        except Exception as e:
            print(f"[api] Error generating AI joke: {e!r}")
            return _error(500, "Unable to generate AI joke")
        return {"success": True, "source": source, "data": joke.to_dict()}

    # ========== Health ==========

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "timestamp": iso_timestamp(),
            "uptime": uptime_seconds(),
        }

    # ========== Fallbacks ==========

    # Registered after every API route and before the page catch-all.
    @app.api_route("/api", methods=ALL_METHODS, include_in_schema=False)
    @app.api_route("/api/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def api_not_found(path: str = ""):
        return _error(404, "API endpoint not found")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def index(full_path: str = ""):
        if not os.path.isfile(index_path):
            return PlainTextResponse("Front end not found", status_code=404)
        return FileResponse(index_path, media_type="text/html")

    return app
