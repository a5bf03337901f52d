"""
Main entrypoint for the Album API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn album_service.app.main:app --port 8080

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.responses import indented_json_response
from .services.album_service import AlbumStore


logger = logging.getLogger(__name__)


def create_app(
    store: Optional[AlbumStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[AlbumStore]
        Album store served by the application.  When omitted a new
        store holding the sample albums is created.
    settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    response_class = indented_json_response(settings.json_indent)
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        default_response_class=response_class,
    )
    app.state.response_class = response_class
    app.state.album_store = store if store is not None else AlbumStore.with_seed_data()
    register_exception_handlers(app)
    app.include_router(api_router)

    logger.info("%s ready with %d albums", settings.project_name, len(app.state.album_store))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
