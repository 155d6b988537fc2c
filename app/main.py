"""ASGI entry point: ``uvicorn main:server_app``."""

from dotenv import load_dotenv

# .env has to be applied before the server module builds its settings.
load_dotenv()

from server.server import handler as server_app  # noqa: E402

__all__ = ["server_app"]
