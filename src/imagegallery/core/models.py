"""Domain models shared by the gallery core modules.

Models
------
LocalImageEntry
    One entry of the local images directory with its public URL.
NormalizedUser
    Photographer information extracted from an Unsplash photo.
NormalizedImage
    Fixed-shape record built from one Unsplash photo.  Every field is
    optional because the upstream payload is untrusted, but the key set is
    always the same: absent values are ``None`` and serialise as ``null``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class LocalImageEntry(BaseModel):
    """A file (or sub-directory) found in the local images directory.

    Attributes:
        name: Raw directory entry name.
        url: Public URL, ``<base_url>/<name>`` with the name unescaped.
    """

    name: str
    url: str


class NormalizedUser(BaseModel):
    """Photographer details; every field is ``None`` when absent upstream.

    Values are copied from the upstream payload without coercion, hence the
    loose annotations.
    """

    id: Any = None
    name: Any = None
    username: Any = None
    portfolio_url: Any = None


class NormalizedImage(BaseModel):
    """Simplified Unsplash photo returned to gallery clients.

    Attributes:
        id: Upstream photo identifier.
        url: Highest resolution available (``full``, then ``regular``, then
            ``small``).
        thumb: Thumbnail URL.
        alt_description: Upstream alt text.
        width: Original width in pixels.
        height: Original height in pixels.
        likes: Like count, copied as-is (``0`` stays ``0``).
        user: Photographer details.
    """

    id: Any = None
    url: Any = None
    thumb: Any = None
    alt_description: Any = None
    width: Any = None
    height: Any = None
    likes: Any = None
    user: NormalizedUser = Field(default_factory=NormalizedUser)
