"""Entry point for the Dog Tracker API.

Launches the FastAPI application under Uvicorn.  Host and port are
read from the ``APP_HOST`` and ``APP_PORT`` environment variables;
everything else (database path, secret key, log level) is read by
``dog_tracker_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import os

from uvicorn import Config, Server

from dog_tracker_api.app.core.config import settings
from dog_tracker_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    host = os.getenv("APP_HOST", "0.0.0.0")
    port = int(os.getenv("APP_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
