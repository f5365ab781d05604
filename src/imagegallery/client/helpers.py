"""Validation and formatting helpers for gallery clients.

These functions operate on image records already shaped like the
``/api/unsplash/imagenes`` output.  Apart from :func:`fetch_images` they are
pure and never raise.
"""

import logging
import math
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

import httpx

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg")
TRUSTED_HOSTS = ("unsplash.com",)
DEFAULT_ALT_TEXT = "Image"

# Enough digits to quantize any finite float to one decimal place
_LIKES_CONTEXT = Context(prec=400)


def fetch_images(api_url: str, client: httpx.Client | None = None) -> list:
    """Fetch the image list from a gallery endpoint.

    Failures are logged and swallowed so a gallery degrades to showing no
    images.

    Args:
        api_url: Endpoint returning a JSON array of images.
        client: Optional HTTP client.  A short-lived one is used otherwise.

    Returns:
        Decoded JSON array, or an empty list on any failure or when the
        payload is not an array.
    """
    try:
        if client is None:
            with httpx.Client(follow_redirects=True) as own_client:
                response = own_client.get(api_url)
        else:
            response = client.get(api_url)

        if not response.is_success:
            raise httpx.HTTPStatusError(
                f"HTTP error! status: {response.status_code}",
                request=response.request,
                response=response,
            )

        images = response.json()
    except (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as e:
        logger.error(f"Error fetching images: {e}")
        return []

    if not isinstance(images, list):
        logger.warning(f"Expected a JSON array from {api_url}, got {type(images).__name__}")
        return []
    return images


def is_valid_image_url(url: Any) -> bool:
    """Check whether *url* looks like an image URL.

    Args:
        url: Candidate URL.

    Returns:
        True if the lower-cased string contains a known image extension or a
        trusted host, False otherwise (including non-strings and ``""``).
    """
    if not url or not isinstance(url, str):
        return False

    lower_url = url.lower()
    return any(ext in lower_url for ext in IMAGE_EXTENSIONS) or any(
        host in lower_url for host in TRUSTED_HOSTS
    )


def format_likes(likes: Any) -> str:
    """Format a like count for display (``999``, ``1.0K``, ``2.3K``).

    Args:
        likes: Like count.

    Returns:
        Formatted count, ``"0"`` for non-numeric, NaN or infinite input.
    """
    # bool is an int subclass but not a count
    if isinstance(likes, bool) or not isinstance(likes, (int, float)):
        return "0"
    if isinstance(likes, float) and not math.isfinite(likes):
        return "0"

    if likes >= 1000:
        # Exact ties round up (1250 -> "1.3K")
        thousands = Decimal(likes / 1000).quantize(
            Decimal("0.1"), rounding=ROUND_HALF_UP, context=_LIKES_CONTEXT
        )
        return f"{thousands}K"

    if isinstance(likes, float) and likes.is_integer():
        return str(int(likes))
    return str(likes)


def is_valid_image_object(image: Any) -> bool:
    """Check that *image* is a mapping with a valid ``url``.

    The ``url`` key must be present; its value must pass
    :func:`is_valid_image_url`.

    Args:
        image: Candidate image record.

    Returns:
        True if the record can be displayed.
    """
    if not image or not isinstance(image, Mapping):
        return False

    required_fields = ("url",)
    has_required_fields = all(field in image for field in required_fields)

    return has_required_fields and is_valid_image_url(image["url"])


def filter_valid_images(images: Any) -> list:
    """Keep only displayable images, preserving order.

    Args:
        images: List (or tuple) of image records.

    Returns:
        Valid records, or an empty list for non-sequence input.
    """
    if not isinstance(images, (list, tuple)):
        return []

    return [image for image in images if is_valid_image_object(image)]


def get_image_alt_text(image: Any) -> str:
    """Resolve the alt text of an image record.

    Priority: ``alt_description``, ``description``, ``"Photo by <user
    name>"``, then ``"Image"``.

    Args:
        image: Image record, possibly ``None``.

    Returns:
        Alt text, never empty.
    """
    if not image or not isinstance(image, Mapping):
        return DEFAULT_ALT_TEXT

    if image.get("alt_description"):
        return image["alt_description"]

    if image.get("description"):
        return image["description"]

    user = image.get("user")
    if isinstance(user, Mapping) and user.get("name"):
        return f"Photo by {user['name']}"

    return DEFAULT_ALT_TEXT
