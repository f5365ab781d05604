"""Error taxonomy for the gallery backend.

Core modules raise these exceptions; the API layer converts each of them
into a JSON error response (see ``imagegallery.api.main``).  Every error
carries a ``detail`` string with the underlying cause so the response can
expose it to the client.
"""

from __future__ import annotations


class GalleryError(Exception):
    """Base class for all gallery errors.

    Attributes:
        detail: Message of the underlying cause (OS error text, upstream
            body, parse failure, ...).
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ConfigError(GalleryError):
    """Required configuration is missing (e.g. the Unsplash access key)."""


class IoError(GalleryError):
    """The local images directory could not be read."""


class UpstreamError(GalleryError):
    """Unsplash answered with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the upstream API.
        body: Raw response body text.
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(body)
        self.status_code = status_code
        self.body = body


class ParseError(GalleryError):
    """A successful upstream response did not contain valid JSON."""


class NetworkError(GalleryError):
    """The upstream API could not be reached."""
