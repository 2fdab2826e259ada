# app.py
"""
Jokebox server launcher.

    python app.py           # listens on $PORT (default 3000)
    uvicorn app:app         # same app, external runner

With APP_ENV=test the module only builds the app and never binds a port.
"""
import uvicorn

import settings
from api import create_app
from jokes import load_jokes
from net_utils import get_network_ip
from services_jokes import JokeService


def build_app():
    """Load the joke snapshot once and wire it into the API."""
    return create_app(JokeService(load_jokes(settings.JOKES_PATH)))


app = build_app()


def _banner(port: int) -> None:
    network_ip = get_network_ip()
    print("\nServer is running!")
    print(f"  Local:    http://localhost:{port}")
    if network_ip:
        print(f"  Network:  http://{network_ip}:{port}")
    print(f"  Environment: {settings.APP_ENV}\n")


def main() -> None:
    if settings.is_test_env():
        print("[app] APP_ENV=test, listener disabled")
        return
    _banner(settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
