"""Image Gallery - local image listing and Unsplash proxy backend."""

__version__ = "0.1.0"

from imagegallery.core.config import GalleryConfig, config

__all__ = [
    "GalleryConfig",
    "config",
]
