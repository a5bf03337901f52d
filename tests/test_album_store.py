from __future__ import annotations

import threading

import pytest
from pydantic import ValidationError

from album_service.app.core.errors import MalformedInput, NotFound
from album_service.app.schemas.album import Album
from album_service.app.services.album_service import SEED_ALBUMS, AlbumStore


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {"id": 5, "title": "X", "artist": "Y", "year": 2000}
    payload.update(overrides)
    return payload


def test_seed_albums_are_listed_in_order(store: AlbumStore) -> None:
    albums = store.list_albums()

    assert [(album.title, album.year) for album in albums] == [
        ("Abbey Road", 1969),
        ("The Dark Side of the Moon", 1973),
        ("Thriller", 1982),
        ("Back in Black", 1980),
    ]
    assert [album.id for album in albums] == [1, 2, 3, 4]


def test_new_store_is_empty_without_seed() -> None:
    assert AlbumStore().list_albums() == []


def test_list_albums_returns_a_copy(store: AlbumStore) -> None:
    albums = store.list_albums()
    albums.clear()

    assert len(store) == len(SEED_ALBUMS)


def test_stored_albums_are_immutable(store: AlbumStore) -> None:
    album = store.list_albums()[0]

    with pytest.raises(ValidationError):
        album.title = "Let It Be"  # type: ignore[misc]

    assert store.get_album("1").title == "Abbey Road"


def test_create_album_appends_to_the_end(store: AlbumStore) -> None:
    created = store.create_album(_payload())

    albums = store.list_albums()
    assert created == Album(id=5, title="X", artist="Y", year=2000)
    assert albums[-1] == created
    assert len(albums) == len(SEED_ALBUMS) + 1


def test_created_album_can_be_found(store: AlbumStore) -> None:
    created = store.create_album(_payload())

    assert store.get_album("5") == created


def test_create_album_ignores_unknown_keys(store: AlbumStore) -> None:
    created = store.create_album(_payload(genre="jazz"))

    assert created.model_dump() == _payload()


def test_duplicate_ids_are_accepted_and_first_match_wins(store: AlbumStore) -> None:
    store.create_album(_payload(id=1, title="Let It Be"))

    assert len(store) == len(SEED_ALBUMS) + 1
    assert store.get_album("1").title == "Abbey Road"


def test_same_payload_twice_creates_two_albums(store: AlbumStore) -> None:
    store.create_album(_payload())
    store.create_album(_payload())

    assert [album.id for album in store.list_albums()][-2:] == [5, 5]


def test_permissive_values_are_accepted(store: AlbumStore) -> None:
    created = store.create_album(_payload(title="", artist="", year=-3))

    assert created.title == ""
    assert created.year == -3


@pytest.mark.parametrize(
    "payload",
    [
        _payload(id="not-an-int"),
        _payload(id="5"),
        _payload(id=5.5),
        _payload(id=True),
        _payload(year="2000"),
        _payload(title=7),
        _payload(artist=None),
        {"id": 5, "title": "X", "artist": "Y"},
        {},
        [],
        "album",
        None,
    ],
)
def test_malformed_payload_is_rejected_without_mutation(store: AlbumStore, payload: object) -> None:
    with pytest.raises(MalformedInput):
        store.create_album(payload)

    assert len(store) == len(SEED_ALBUMS)


@pytest.mark.parametrize("album_id", ["1", "2", "3", "4"])
def test_get_album_finds_every_seed(store: AlbumStore, album_id: str) -> None:
    assert store.get_album(album_id).id == int(album_id)


@pytest.mark.parametrize("album_id", ["999", "0", "abc", "", "01", " 1"])
def test_get_album_unknown_id_raises_not_found(store: AlbumStore, album_id: str) -> None:
    with pytest.raises(NotFound) as exc:
        store.get_album(album_id)

    assert exc.value.album_id == album_id


def test_concurrent_appends_are_all_kept(store: AlbumStore) -> None:
    threads_count = 8
    per_thread = 50

    def worker(offset: int) -> None:
        for index in range(per_thread):
            store.create_album(_payload(id=offset * per_thread + index + 100))

    threads = [threading.Thread(target=worker, args=(offset,)) for offset in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    albums = store.list_albums()
    assert len(albums) == len(SEED_ALBUMS) + threads_count * per_thread
    assert len({album.id for album in albums[len(SEED_ALBUMS):]}) == threads_count * per_thread
