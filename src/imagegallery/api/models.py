"""Pydantic response models for the Image Gallery API.

These models define the JSON schema of the endpoints.  FastAPI uses them
for response serialisation and OpenAPI documentation generation.

Models
------
LocalImageItem
    Item of ``GET /api/imagenes`` — ``{nombre, url}``.
ErrorResponse
    Body of every error response — ``{error, details}``.  ``details`` is
    omitted when there is no underlying cause to report (missing access
    key).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from imagegallery.core.models import LocalImageEntry


class LocalImageItem(BaseModel):
    """One local image as exposed by ``GET /api/imagenes``.

    Attributes:
        nombre: Raw file name in the images directory.
        url: Public URL of the file.
    """

    nombre: str = Field(
        ...,
        description="File name in the images directory.",
    )
    url: str = Field(
        ...,
        description="Public URL of the image (file name is not escaped).",
    )

    @classmethod
    def from_entry(cls, entry: LocalImageEntry) -> LocalImageItem:
        """Build the wire item from a core :class:`LocalImageEntry`."""
        return cls(nombre=entry.name, url=entry.url)


class ErrorResponse(BaseModel):
    """JSON error body.

    Attributes:
        error: Fixed human-readable message for the failure kind.
        details: Underlying cause (OS error text, upstream body, ...).
    """

    error: str = Field(
        ...,
        description="Human-readable error message.",
    )
    details: str | None = Field(
        default=None,
        description="Underlying cause of the error, when available.",
    )
