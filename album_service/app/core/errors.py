"""
Error taxonomy for the album store and its HTTP translation.

Two failures exist: a request body that does not match the album
shape (``MalformedInput``) and a lookup that matches no album
(``NotFound``).  Both derive from ``AlbumError``, which carries the
HTTP status code and response body the error maps to.  The handler
installed by ``register_exception_handlers`` turns any ``AlbumError``
raised inside a route into that response.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status

from album_service.app.core.responses import IndentedJSONResponse


logger = logging.getLogger(__name__)


class AlbumError(Exception):
    """Base class for errors raised by the album store."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def body(self) -> Dict[str, Any]:
        return {"message": str(self)}


class MalformedInput(AlbumError):
    """The payload could not be parsed into an album."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, reason: str = "Invalid JSON") -> None:
        super().__init__(reason)
        self.reason = reason

    def body(self) -> Dict[str, Any]:
        return {"error": "Invalid JSON"}


class NotFound(AlbumError):
    """No album matches the requested identifier."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, album_id: str) -> None:
        super().__init__(f"album {album_id!r} not found")
        self.album_id = album_id

    def body(self) -> Dict[str, Any]:
        return {"message": "album not found"}


async def album_error_handler(request: Request, exc: AlbumError) -> IndentedJSONResponse:
    """Translate an ``AlbumError`` into its JSON response."""
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc)
    response_class = getattr(request.app.state, "response_class", IndentedJSONResponse)
    return response_class(status_code=exc.status_code, content=exc.body())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AlbumError, album_error_handler)
