"""Entry point for the Student Registry API.

Launches the FastAPI application with Uvicorn.  Host, port and log level
come from ``student_registry_api.app.core.config.settings`` and can be
overridden with the ``API_HOST``, ``API_PORT`` and ``LOG_LEVEL``
environment variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from student_registry_api.app.core.config import settings
from student_registry_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.api_host, settings.api_port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
