from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from album_service.app.main import create_app
from album_service.app.services.album_service import AlbumStore

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fastapi import FastAPI


@pytest.fixture
def store() -> AlbumStore:
    return AlbumStore.with_seed_data()


@pytest.fixture
def app(store: AlbumStore) -> FastAPI:
    return create_app(store=store)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
