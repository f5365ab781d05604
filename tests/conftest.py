"""Shared pytest fixtures for Image Gallery tests."""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from imagegallery.api.main import create_app
from imagegallery.core.config import GalleryConfig


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def images_dir(temp_dir: Path) -> Path:
    """Create an images directory with a few sample files.

    Args:
        temp_dir: Temporary directory from fixture

    Returns:
        Path to the images directory
    """
    directory = temp_dir / "images"
    directory.mkdir()
    (directory / "foto1.jpg").write_bytes(b"\xff\xd8\xff fake jpeg")
    (directory / "imagen.png").write_bytes(b"\x89PNG fake png")
    return directory


@pytest.fixture
def non_utf8_entry(images_dir: Path) -> bytes:
    """Add a file whose name is not valid UTF-8 to the images directory.

    Returns:
        Raw file name bytes
    """
    raw_name = b"bad\xff.jpg"
    try:
        with open(os.path.join(os.fsencode(images_dir), raw_name), "wb") as handle:
            handle.write(b"\xff\xd8\xff fake jpeg")
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 file names")
    return raw_name


@pytest.fixture
def test_config(images_dir: Path) -> GalleryConfig:
    """Create a test configuration pointing at the temporary images directory.

    Args:
        images_dir: Images directory from fixture

    Returns:
        GalleryConfig instance for testing
    """
    return GalleryConfig(
        _env_file=None,
        unsplash_access_key="test-key",
        unsplash_api_url="https://api.unsplash.test",
        images_dir=images_dir,
        public_base_url="http://backend:4000/images",
    )


@pytest.fixture
def sample_photo() -> dict:
    """A complete upstream Unsplash photo.

    Returns:
        Photo dictionary in the Unsplash schema
    """
    return {
        "id": "abc123",
        "urls": {
            "full": "https://images.unsplash.com/full.jpg",
            "regular": "https://images.unsplash.com/regular.jpg",
            "small": "https://images.unsplash.com/small.jpg",
            "thumb": "https://images.unsplash.com/thumb.jpg",
        },
        "alt_description": "Beautiful landscape",
        "description": "A long description",
        "width": 4000,
        "height": 3000,
        "likes": 250,
        "user": {
            "id": "user123",
            "name": "John Doe",
            "username": "johndoe",
            "portfolio_url": "https://johndoe.com",
        },
    }


class FakeUnsplash:
    """Deterministic stand-in for the Unsplash API.

    Records every request and answers with the configured status and body.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: str = "[]"
        self.error: Exception | None = None

    def respond_json(self, payload, status_code: int = 200) -> None:
        self.status_code = status_code
        self.body = json.dumps(payload)

    def respond_text(self, text: str, status_code: int) -> None:
        self.status_code = status_code
        self.body = text

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)


@pytest.fixture
def fake_unsplash() -> FakeUnsplash:
    """Fresh fake Unsplash API for each test."""
    return FakeUnsplash()


@pytest.fixture
def mock_http_client(fake_unsplash: FakeUnsplash) -> httpx.AsyncClient:
    """Async HTTP client routed to :class:`FakeUnsplash`."""
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_unsplash.handler))


@pytest.fixture
def test_client(
    test_config: GalleryConfig, mock_http_client: httpx.AsyncClient
) -> Generator[TestClient, None, None]:
    """FastAPI TestClient with the fake Unsplash API injected.

    The client is used as a context manager so the application lifespan
    (which builds the Unsplash proxy) runs.
    """
    app = create_app(test_config, http_client=mock_http_client)
    with TestClient(app) as client:
        yield client
