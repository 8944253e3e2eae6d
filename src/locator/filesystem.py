"""Filesystem locator for scheme-less paths."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Union

from common.paths import is_absolute_url
from errors import ResourceIOError, ResourceNotFoundError
from .base import UriLocator

logger = logging.getLogger(__name__)


def open_file(path: Path, uri: str) -> BinaryIO:
    """Open ``path`` for binary reading, mapping OS errors to locator errors."""
    if not path.is_file():
        raise ResourceNotFoundError(uri)
    try:
        return open(path, "rb")
    except OSError as exc:
        raise ResourceIOError(f"Cannot read {uri}: {exc}") from exc


class FileSystemUriLocator(UriLocator):
    """Resolves plain paths, relative ones against ``base_dir``."""

    name = "filesystem"

    def __init__(self, base_dir: Union[str, Path] = "."):
        self._base_dir = Path(base_dir).expanduser()

    @property
    def base_dir(self) -> Path:
        """Directory relative URIs are resolved against."""
        return self._base_dir

    def accepts(self, uri: str) -> bool:
        return bool(uri) and not is_absolute_url(uri)

    def locate(self, uri: str) -> BinaryIO:
        path = Path(uri.replace("\\", "/"))
        if not path.is_absolute():
            path = self._base_dir / path
        logger.debug("Locating %s at %s", uri, path)
        return open_file(path, uri)

    def __repr__(self) -> str:
        return f"FileSystemUriLocator(base_dir={str(self._base_dir)!r})"
