"""Local image directory listing.

The lister reads the entry names of the configured images directory and
maps each one to a :class:`~imagegallery.core.models.LocalImageEntry` whose
URL points at the static file route.  No filtering by file type is done:
whatever the directory contains (sub-directories included) is returned, in
the order the directory read produced it.

The directory read is injected through ``list_dir`` so tests can replace
the filesystem with a deterministic double.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from imagegallery.core.errors import IoError
from imagegallery.core.models import LocalImageEntry

logger = logging.getLogger(__name__)


def decode_entry_name(name: str | bytes) -> str:
    """Return *name* as valid UTF-8 text.

    Bytes that are not valid UTF-8 (kept as surrogate escapes by
    :func:`os.listdir`) are replaced with U+FFFD so the name can be encoded
    in a JSON response.

    Args:
        name: Directory entry name as returned by the directory read.

    Returns:
        Decoded name.
    """
    return os.fsencode(name).decode("utf-8", "replace")


def build_image_url(base_url: str, name: str) -> str:
    """Join *base_url* and a raw entry *name*.

    The name is embedded verbatim: spaces and non-ASCII characters are not
    escaped.

    Args:
        base_url: Public URL prefix (with or without a trailing slash).
        name: Directory entry name.

    Returns:
        ``<base_url>/<name>``.
    """
    return f"{base_url.rstrip('/')}/{name}"


class LocalImageLister:
    """List the images directory as public URLs.

    Args:
        images_dir: Directory to read.
        base_url: Public URL prefix for the entries.
        list_dir: Callable returning the entry names of a directory.
            Defaults to :func:`os.listdir`.
    """

    def __init__(
        self,
        images_dir: Path,
        base_url: str,
        list_dir: Callable[[Path], list[str]] | None = None,
    ) -> None:
        self.images_dir = Path(images_dir)
        self.base_url = base_url
        self._list_dir = list_dir or os.listdir

    def list_images(self) -> list[LocalImageEntry]:
        """Read the directory and build one entry per name.

        Returns:
            Entries in directory-read order.

        Raises:
            IoError: If the directory cannot be read (missing, permission
                denied, not a directory).
        """
        try:
            names = self._list_dir(self.images_dir)
        except OSError as e:
            raise IoError(str(e)) from e

        logger.debug(f"Listed {len(names)} entries in {self.images_dir}")
        entries = []
        for name in names:
            name = decode_entry_name(name)
            entries.append(LocalImageEntry(name=name, url=build_image_url(self.base_url, name)))
        return entries
