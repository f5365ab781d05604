"""Image Gallery — FastAPI Application.

This module is the single entry point for the web application.  It defines
the ``create_app()`` factory, the module-level ``app`` instance built from
the global configuration, all REST API routes, and the ``main()`` CLI
function that launches the uvicorn server.

Architecture
------------
The application follows a stateless REST pattern:

- **Configuration** comes from :class:`~imagegallery.core.config.GalleryConfig`
  (environment variables and ``.env``).
- **Local images** are listed by
  :class:`~imagegallery.core.local_images.LocalImageLister` and served as
  static files under ``/images``.
- **Unsplash photos** are fetched and normalized by
  :class:`~imagegallery.core.unsplash.UnsplashProxy` using a shared
  ``httpx.AsyncClient`` opened for the lifetime of the application.
- **Errors** raised by the core (:mod:`imagegallery.core.errors`) are turned
  into ``{error, details}`` JSON bodies by a single exception handler.

Endpoints
---------
========  ============================  ====================================
Method    Path                          Purpose
========  ============================  ====================================
GET HEAD  ``/api/imagenes``             List local images with their URLs
GET HEAD  ``/api/unsplash/imagenes``    Random Unsplash photos, normalized
GET       ``/images/{name}``            Static local image files
========  ============================  ====================================

Usage
-----
CLI (installed entry point)::

    imagegallery

Direct invocation::

    python -m imagegallery.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from imagegallery import __version__
from imagegallery.api.models import ErrorResponse, LocalImageItem
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
from imagegallery.core.models import NormalizedImage
from imagegallery.core.unsplash import UnsplashProxy

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Error messages returned to clients, keyed by error class.
# ---------------------------------------------------------------------------
ERROR_MESSAGES: dict[type[GalleryError], str] = {
    IoError: "Error al leer el directorio de imágenes",
    ConfigError: "Falta la variable de entorno UNSPLASH_ACCESS_KEY.",
    UpstreamError: "Error de la API de Unsplash",
    ParseError: "Error al obtener imágenes desde Unsplash",
    NetworkError: "Error al obtener imágenes desde Unsplash",
}


def error_response(exc: GalleryError) -> JSONResponse:
    """Convert a core error into its JSON response.

    - ``ConfigError`` → 500 with the message only.
    - ``UpstreamError`` → upstream status with the raw body as details.
    - anything else → 500 with the underlying message as details.

    Args:
        exc: The error raised by a core component.

    Returns:
        JSON response with an :class:`ErrorResponse` body.
    """
    message = ERROR_MESSAGES.get(type(exc), "Error interno del servidor")

    if isinstance(exc, ConfigError):
        body = ErrorResponse(error=message)
        status_code = 500
    elif isinstance(exc, UpstreamError):
        body = ErrorResponse(error=message, details=exc.body)
        status_code = exc.status_code
    else:
        body = ErrorResponse(error=message, details=exc.detail)
        status_code = 500

    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def create_app(
    app_config: GalleryConfig | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
    list_dir: Callable[[Path], list[str]] | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    I/O collaborators can be injected so tests can replace them with
    deterministic doubles.

    Args:
        app_config: Configuration to use.  Defaults to the global
            :data:`~imagegallery.core.config.config`.
        http_client: Client for outbound Unsplash calls.  When omitted, one
            is opened at startup and closed at shutdown; an injected client
            is left open.
        list_dir: Directory read used by the local image lister.  Defaults
            to :func:`os.listdir`.

    Returns:
        The configured application.
    """
    cfg = app_config or config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Open the outbound HTTP client and build the Unsplash proxy.

        Args:
            app: The FastAPI application instance.

        Yields:
            Control back to the application for the duration of its lifetime.
        """
        # --- Startup -------------------------------------------------------
        owns_client = http_client is None
        client = http_client or httpx.AsyncClient(follow_redirects=True)
        app.state.unsplash = UnsplashProxy(
            cfg.unsplash_access_key,
            client,
            api_url=cfg.unsplash_api_url,
            count=cfg.unsplash_count,
        )
        if not cfg.unsplash_access_key:
            logger.warning("UNSPLASH_ACCESS_KEY is not set; /api/unsplash/imagenes will fail.")
        logger.info(f"Serving images from {cfg.images_dir} as {cfg.public_base_url}")

        yield  # Application runs here.

        # --- Shutdown ------------------------------------------------------
        if owns_client:
            await client.aclose()
            logger.info("HTTP client closed on shutdown.")

    app = FastAPI(
        title="Image Gallery",
        description="Local image listing and Unsplash random photos proxy.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = cfg
    app.state.lister = LocalImageLister(cfg.images_dir, cfg.public_base_url, list_dir=list_dir)

    # Allow cross-origin requests from the gallery frontend.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # The directory is not checked at startup: a missing directory is
    # reported by /api/imagenes instead of preventing the server from starting.
    app.mount(
        "/images",
        StaticFiles(directory=str(cfg.images_dir), check_dir=False),
        name="images",
    )

    # -----------------------------------------------------------------------
    # Exception handlers.
    # -----------------------------------------------------------------------

    @app.exception_handler(GalleryError)
    async def gallery_error_handler(request: Request, exc: GalleryError) -> JSONResponse:
        """Log a core error and return its JSON body."""
        if isinstance(exc, UpstreamError):
            logger.error(f"Unsplash API error: {exc.status_code} {exc.body}")
        else:
            logger.error(f"{request.method} {request.url.path} failed: {exc!r}")
        return error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
        """Answer unsupported methods on known routes with 404."""
        if exc.status_code == 405:
            exc = StarletteHTTPException(status_code=404, detail="Not Found")
        return await http_exception_handler(request, exc)

    # -----------------------------------------------------------------------
    # Routes.
    # -----------------------------------------------------------------------

    @app.api_route("/api/imagenes", methods=["GET", "HEAD"], response_model=list[LocalImageItem])
    async def list_local_images(request: Request) -> list[LocalImageItem]:
        """List the local images directory.

        Returns:
            One ``{nombre, url}`` item per directory entry, in directory
            order.

        Raises:
            IoError: If the directory cannot be read (mapped to 500).
        """
        lister: LocalImageLister = request.app.state.lister
        return [LocalImageItem.from_entry(entry) for entry in lister.list_images()]

    @app.api_route(
        "/api/unsplash/imagenes", methods=["GET", "HEAD"], response_model=list[NormalizedImage]
    )
    async def list_unsplash_images(request: Request) -> list[NormalizedImage]:
        """Fetch random photos from Unsplash in the normalized schema.

        Returns:
            Normalized photos in upstream order.

        Raises:
            ConfigError: Missing access key (mapped to 500).
            UpstreamError: Unsplash failure (upstream status relayed).
            ParseError: Invalid JSON from Unsplash (mapped to 500).
            NetworkError: Unsplash unreachable (mapped to 500).
        """
        proxy: UnsplashProxy = request.app.state.unsplash
        return await proxy.fetch_random_photos()

    return app


# ---------------------------------------------------------------------------
# FastAPI application instance built from the global configuration.
# ---------------------------------------------------------------------------
app = create_app()


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~imagegallery.core.config.config` (which
    loads from the ``SERVER_HOST`` and ``PORT`` environment variables).
    Defaults to ``0.0.0.0:4000``.

    This function is registered as the ``imagegallery`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Backend listening on http://{config.server_host}:{config.port}")

    uvicorn.run(
        "imagegallery.api.main:app",
        host=config.server_host,
        port=config.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
