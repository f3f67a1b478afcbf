"""Entry point for the Meeting Management API.

Serves the FastAPI application with Uvicorn.  Host and port are read
from the ``API_HOST`` and ``API_PORT`` environment variables (defaults
``0.0.0.0`` and ``8080``); application settings such as
``MEETINGS_FILE`` and ``LOG_LEVEL`` are documented in
``meeting_management_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from meeting_management_api.app.main import app


async def run_api() -> None:
    """Start the API server and wait until it shuts down.

    Meetings are saved back to the JSON file by the application's
    shutdown handler when the server stops (e.g. on Ctrl+C).
    """
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8080"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    logging.getLogger(__name__).info("Serving meetings on %s:%d", host, port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except KeyboardInterrupt:
        pass
