"""Entry point for the Album API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root::

    python run.py

Logging is configured by ``create_app``, so uvicorn is started without
its own logging config.  The bind address is read from the ``HOST``
and ``PORT`` environment variables (defaults ``localhost`` and
``8080``).  See ``album_service/app/core/config.py`` for the other
supported variables.
"""
import asyncio
import logging

from uvicorn import Config, Server

from album_service.app.core.config import settings
from album_service.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Listening on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
