"""
Top‑level API router.

Aggregates the domain routers under their prefixes.  The album routes
are served at the root (``/albums``) without a version prefix.
"""

from fastapi import APIRouter

from .endpoints import albums

router = APIRouter()

router.include_router(albums.router, prefix="/albums", tags=["albums"])
