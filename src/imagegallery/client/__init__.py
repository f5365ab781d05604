"""Client-side helpers for consuming the gallery API."""

from imagegallery.client.helpers import (
    fetch_images,
    filter_valid_images,
    format_likes,
    get_image_alt_text,
    is_valid_image_object,
    is_valid_image_url,
)

__all__ = [
    "fetch_images",
    "filter_valid_images",
    "format_likes",
    "get_image_alt_text",
    "is_valid_image_object",
    "is_valid_image_url",
]
