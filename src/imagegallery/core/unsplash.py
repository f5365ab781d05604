"""Unsplash "random photos" proxy.

This module forwards a single fixed request to the Unsplash API and
reshapes the answer into :class:`~imagegallery.core.models.NormalizedImage`
records.

The upstream payload is treated as untrusted input: any level of the photo
object (the photo itself, ``urls``, ``user`` or a leaf field) may be missing
or of an unexpected type.  Extraction never raises; absent values become
``None`` and the record keeps its full key set.

Failure modes
-------------
ConfigError
    No access key configured.  Raised before any outbound call.
UpstreamError
    Unsplash answered with a non-2xx status.  Status and raw body are kept.
ParseError
    A 2xx answer whose body is not valid JSON.
NetworkError
    The request itself failed (DNS, connection refused, TLS, ...).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from imagegallery.core.errors import ConfigError, NetworkError, ParseError, UpstreamError
from imagegallery.core.models import NormalizedImage, NormalizedUser

logger = logging.getLogger(__name__)

RANDOM_PHOTOS_PATH = "/photos/random"
DEFAULT_COUNT = 100


def _as_mapping(value: Any) -> Mapping:
    """Return *value* if it is a mapping, otherwise an empty dict."""
    return value if isinstance(value, Mapping) else {}


def _reject_constant(token: str) -> Any:
    """Refuse the non-standard ``NaN``, ``Infinity`` and ``-Infinity`` tokens."""
    raise ValueError(f"Invalid JSON token: {token}")


def normalize_photo(photo: Any) -> NormalizedImage:
    """Build a :class:`NormalizedImage` from one upstream photo.

    ``url`` is the first truthy value of ``urls.full``, ``urls.regular`` and
    ``urls.small``.  Every other field is copied by direct correspondence
    without default substitution.

    Args:
        photo: One element of the upstream JSON payload.

    Returns:
        The normalized record.  Missing fields are ``None``.
    """
    photo = _as_mapping(photo)
    urls = _as_mapping(photo.get("urls"))
    user = _as_mapping(photo.get("user"))

    return NormalizedImage(
        id=photo.get("id"),
        url=urls.get("full") or urls.get("regular") or urls.get("small"),
        thumb=urls.get("thumb"),
        alt_description=photo.get("alt_description"),
        width=photo.get("width"),
        height=photo.get("height"),
        likes=photo.get("likes"),
        user=NormalizedUser(
            id=user.get("id"),
            name=user.get("name"),
            username=user.get("username"),
            portfolio_url=user.get("portfolio_url"),
        ),
    )


def normalize_photos(payload: Any) -> list[NormalizedImage]:
    """Normalize an upstream payload into a list of records.

    A JSON array is normalized element by element, preserving order.  Any
    other value (typically a single photo object) is treated as a
    one-element array.

    Args:
        payload: Decoded upstream JSON.

    Returns:
        Normalized records.
    """
    photos = payload if isinstance(payload, list) else [payload]
    return [normalize_photo(photo) for photo in photos]


class UnsplashProxy:
    """Fetch random photos from Unsplash and normalize them.

    Args:
        access_key: Unsplash access key.  Checked on every call, so a proxy
            can be built before the key is available.
        client: HTTP client used for the outbound call.  Owned by the
            caller.
        api_url: Base URL of the Unsplash API.
        count: Number of photos requested.
    """

    def __init__(
        self,
        access_key: str | None,
        client: httpx.AsyncClient,
        api_url: str = "https://api.unsplash.com",
        count: int = DEFAULT_COUNT,
    ) -> None:
        self.access_key = access_key
        self.client = client
        self.api_url = api_url
        self.count = count

    @property
    def endpoint(self) -> str:
        """Full URL of the random photos endpoint (without query string)."""
        return f"{self.api_url.rstrip('/')}{RANDOM_PHOTOS_PATH}"

    async def fetch_random_photos(self) -> list[NormalizedImage]:
        """Issue one request to Unsplash and normalize the answer.

        Returns:
            Normalized photos in upstream order.

        Raises:
            ConfigError: If the access key is missing or blank.
            UpstreamError: If Unsplash answers with a non-2xx status.
            ParseError: If a 2xx body is not valid JSON.
            NetworkError: If the request cannot be completed.
        """
        if not self.access_key or not self.access_key.strip():
            raise ConfigError("missing access key")

        try:
            response = await self.client.get(
                self.endpoint,
                params={"count": self.count},
                headers={"Authorization": f"Client-ID {self.access_key}"},
            )
        except httpx.HTTPError as e:
            raise NetworkError(str(e)) from e

        if not response.is_success:
            raise UpstreamError(response.status_code, response.text)

        try:
            payload = json.loads(response.text, parse_constant=_reject_constant)
        except ValueError as e:
            raise ParseError(str(e)) from e

        images = normalize_photos(payload)
        logger.info(f"Fetched {len(images)} photos from Unsplash")
        return images
