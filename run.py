"""Entry point for the Student Records API.

Serves the FastAPI application with Uvicorn.  Host, port, log level
and database location are read from environment variables (``HOST``,
``PORT``, ``LOG_LEVEL``, ``DATABASE_URL``); see
``student_records_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from student_records_api.app.core.config import settings
from student_records_api.app.main import app


async def main() -> None:
    """Start the API server and run until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Logging is configured by the application; see core.logging_config.
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
