"""
Album endpoints.

These routes expose the in‑memory album collection:

* ``GET /albums`` lists every album in insertion order.
* ``POST /albums`` appends a new album built from the JSON body.
* ``GET /albums/{album_id}`` returns the first album with that id.

Failures are raised as ``MalformedInput``/``NotFound`` and rendered by
the exception handler registered in ``core.errors``.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from album_service.app.api.deps import get_album_store
from album_service.app.core.errors import MalformedInput
from album_service.app.schemas.album import Album, AlbumCreate
from album_service.app.services.album_service import AlbumStore

router = APIRouter()


@router.get("", response_model=List[Album])
async def list_albums(store: AlbumStore = Depends(get_album_store)) -> List[Album]:
    """Return all albums."""
    return store.list_albums()


@router.post(
    "",
    response_model=Album,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": AlbumCreate.model_json_schema()}},
        }
    },
)
async def create_album(request: Request, store: AlbumStore = Depends(get_album_store)) -> Album:
    """Create an album from the request body.

    The body is decoded here rather than by FastAPI so that every kind
    of bad input, from unparsable bytes to a wrong field type, yields
    the same 400 response.
    """
    try:
        payload = await request.json()
    except ValueError as exc:
        raise MalformedInput("body is not valid JSON") from exc
    return store.create_album(payload)


@router.get("/{album_id}", response_model=Album)
async def get_album(album_id: str, store: AlbumStore = Depends(get_album_store)) -> Album:
    """Retrieve a single album by ID.

    Returns HTTP 404 if no album has this id.
    """
    return store.get_album(album_id)
