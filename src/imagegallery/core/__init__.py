"""Core gallery logic: configuration, errors, models, and the two data sources.

Modules
-------
config
    Pydantic Settings configuration loaded from the environment.
errors
    Error taxonomy raised by the core and mapped to HTTP by the API layer.
models
    Local entry and normalized Unsplash photo models.
local_images
    Directory lister building public URLs.
unsplash
    Unsplash random photos proxy and payload normalization.
"""

from imagegallery.core.config import GalleryConfig, config
from imagegallery.core.errors import (
    ConfigError,
    GalleryError,
    IoError,
    NetworkError,
    ParseError,
    UpstreamError,
)
from imagegallery.core.local_images import LocalImageLister
from imagegallery.core.models import LocalImageEntry, NormalizedImage, NormalizedUser
from imagegallery.core.unsplash import UnsplashProxy, normalize_photo, normalize_photos

__all__ = [
    "GalleryConfig",
    "config",
    "GalleryError",
    "ConfigError",
    "IoError",
    "UpstreamError",
    "ParseError",
    "NetworkError",
    "LocalImageEntry",
    "NormalizedImage",
    "NormalizedUser",
    "LocalImageLister",
    "UnsplashProxy",
    "normalize_photo",
    "normalize_photos",
]
