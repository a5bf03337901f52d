"""
Shared FastAPI dependencies.

The album store is owned by the application instance
(``app.state.album_store``) rather than by a module, so every route
obtains it through ``get_album_store``.  Tests can swap the store by
replacing the state attribute or overriding this dependency.
"""

from fastapi import Request

from album_service.app.services.album_service import AlbumStore


def get_album_store(request: Request) -> AlbumStore:
    return request.app.state.album_store
