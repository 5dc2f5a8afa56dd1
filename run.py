"""Entry point for the Home Service Booking API.

Serves the FastAPI application with uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``5000``); see ``home_service_api.app.core.config`` for the other
settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from home_service_api.app.core.config import settings
from home_service_api.app.main import app


async def run_api() -> None:
    """Start the API server using Uvicorn."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server running on http://localhost:%s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
