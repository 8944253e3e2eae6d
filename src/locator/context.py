"""Web-context locator: ``/``-rooted URIs served from a document root."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Optional, Union

from common.paths import normalize_path
from errors import ResourceNotFoundError
from .base import UriLocator
from .filesystem import open_file


class ContextUriLocator(UriLocator):
    """Maps ``/css/a.css`` onto ``<context_root>/css/a.css``.

    Without a configured root every URI is declined. ``..`` segments cannot
    escape the root.
    """

    name = "context"

    def __init__(self, context_root: Optional[Union[str, Path]] = None):
        self._root = Path(context_root).expanduser() if context_root else None

    def accepts(self, uri: str) -> bool:
        return self._root is not None and uri.startswith("/") and not uri.startswith("//")

    def locate(self, uri: str) -> BinaryIO:
        if self._root is None:
            raise ResourceNotFoundError(uri, "No context root configured")
        relative = normalize_path(uri).lstrip("/")
        return open_file(self._root / relative, uri)

    def __repr__(self) -> str:
        root = str(self._root) if self._root else None
        return f"ContextUriLocator(context_root={root!r})"
