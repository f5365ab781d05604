"""Configuration management for the Image Gallery backend.

This module provides centralized configuration management using Pydantic Settings.
Configuration is loaded from plain (unprefixed) environment variables so the
service keeps the variable names its deployment already uses, most notably
``UNSPLASH_ACCESS_KEY`` and ``PORT``.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables
2. .env file in the working directory
3. Default values defined in GalleryConfig

Example .env file:
    UNSPLASH_ACCESS_KEY=your-unsplash-access-key
    PORT=4000
    IMAGES_DIR=images
    PUBLIC_BASE_URL=http://backend:4000/images

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
It is the default used by ``imagegallery.api.main.create_app`` when no
explicit configuration is passed in.

Usage Example
-------------
    from imagegallery.core.config import config

    print(config.images_dir)
    print(config.port)

Access Key
----------
The Unsplash access key is optional at load time.  A missing key does not
prevent the server from starting; it is checked on every call to the proxy
endpoint, which answers with a 500 error until the key is provided.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GalleryConfig(BaseSettings):
    """Main configuration for the Image Gallery backend.

    Attributes
    ----------
    Unsplash Settings:
        unsplash_access_key : str | None
            Client-ID credential sent to the Unsplash API
        unsplash_api_url : str
            Base URL of the Unsplash API
        unsplash_count : int
            Number of random photos requested per call (1-100)

    Local Images:
        images_dir : Path
            Directory listed by ``GET /api/imagenes`` and served under ``/images``
        public_base_url : str
            Prefix used to build the public URL of each local image

    Server Settings:
        server_host : str
            Server bind address (0.0.0.0 for all interfaces)
        port : int
            Server port (1-65535)
        log_level : str
            Root logging level used by the CLI entry point

    Examples
    --------
    Create a custom configuration:

        >>> custom_config = GalleryConfig(
        ...     unsplash_access_key="test-key",
        ...     images_dir="/srv/gallery",
        ...     _env_file=None,
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

    # Unsplash settings
    unsplash_access_key: str | None = Field(
        default=None,
        description="Unsplash access key (sent as 'Authorization: Client-ID <key>')",
    )
    unsplash_api_url: str = Field(
        default="https://api.unsplash.com",
        description="Base URL of the Unsplash API",
    )
    unsplash_count: int = Field(
        default=100,
        description="Number of random photos requested from Unsplash",
        ge=1,
        le=100,
    )

    # Local images
    images_dir: Path = Field(
        default=Path("images"),
        description="Directory holding the locally stored images",
    )
    public_base_url: str = Field(
        default="http://backend:4000/images",
        description="URL prefix for locally stored images",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for all interfaces)",
    )
    port: int = Field(
        default=4000,
        description="Server port",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level for the server process",
    )


# Global configuration instance
# Loads values from the environment and the .env file at import time.
config = GalleryConfig()
