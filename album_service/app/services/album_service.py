"""
In‑memory album store.

``AlbumStore`` owns the ordered collection of albums and provides the
three operations exposed by the API: listing every album, appending a
new one and looking one up by identifier.  The collection lives only
as long as the store; nothing is persisted.

A store is created once by ``create_app`` and attached to the
application state.  All access to the underlying list goes through a
single lock, so concurrent requests never race on an append.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from album_service.app.core.errors import MalformedInput, NotFound
from album_service.app.schemas.album import Album, AlbumCreate


logger = logging.getLogger(__name__)


SEED_ALBUMS = (
    Album(id=1, title="Abbey Road", artist="The Beatles", year=1969),
    Album(id=2, title="The Dark Side of the Moon", artist="Pink Floyd", year=1973),
    Album(id=3, title="Thriller", artist="Michael Jackson", year=1982),
    Album(id=4, title="Back in Black", artist="AC/DC", year=1980),
)


class AlbumStore:
    """Thread‑safe, insertion‑ordered collection of albums."""

    def __init__(self, seed: Optional[Iterable[Album]] = None) -> None:
        self._albums: List[Album] = list(seed or ())
        self._lock = threading.Lock()

    @classmethod
    def with_seed_data(cls) -> "AlbumStore":
        """Return a store holding the four sample albums."""
        return cls(SEED_ALBUMS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._albums)

    def list_albums(self) -> List[Album]:
        """Return a copy of all albums in insertion order."""
        with self._lock:
            return list(self._albums)

    def create_album(self, payload: Any) -> Album:
        """Validate ``payload`` and append the resulting album.

        ``payload`` is the decoded JSON body of the request.  It must be
        an object with an integer ``id`` and ``year`` and a string
        ``title`` and ``artist``; unknown keys are ignored.  Ids are not
        checked for uniqueness, so posting the same payload twice stores
        two albums.

        Raises
        ------
        MalformedInput
            If the payload does not have the album shape.  The store is
            left untouched.
        """
        try:
            data = AlbumCreate.model_validate(payload)
        except ValidationError as exc:
            raise MalformedInput(f"{exc.error_count()} validation error(s)") from exc
        album = Album(**data.model_dump())
        with self._lock:
            self._albums.append(album)
            total = len(self._albums)
        logger.info("Created album %s (%s albums stored)", album.id, total)
        return album

    def get_album(self, album_id: str) -> Album:
        """Return the first album whose id, as text, equals ``album_id``.

        ``album_id`` comes straight from the URL and need not be
        numeric; text that is not an id simply matches nothing.

        Raises
        ------
        NotFound
            If no album matches.
        """
        with self._lock:
            for album in self._albums:
                if str(album.id) == album_id:
                    return album
        logger.debug("Album %r not found", album_id)
        raise NotFound(album_id)
