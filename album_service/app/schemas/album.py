"""
Pydantic models for album data.

``AlbumBase`` holds the four album fields.  ``AlbumCreate`` validates
request bodies and ``Album`` is the immutable record kept by the store
and returned by the API.  Types are strict: a numeric string is not an
integer and a number is not a title.  No further checks are applied;
duplicate ids, any year and empty strings are all accepted.
"""

from pydantic import BaseModel, Field, StrictInt, StrictStr


class AlbumBase(BaseModel):
    """Fields shared by every album schema."""

    id: StrictInt = Field(..., examples=[5])
    title: StrictStr = Field(..., examples=["Blue Train"])
    artist: StrictStr = Field(..., examples=["John Coltrane"])
    year: StrictInt = Field(..., examples=[1957])


class AlbumCreate(AlbumBase):
    """Schema for the body of ``POST /albums``."""
    pass


class Album(AlbumBase):
    """An album held by the store."""

    model_config = {
        "frozen": True,
    }
