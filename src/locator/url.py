"""Absolute-URL locator: ``http(s)://`` via requests, ``file://`` from disk."""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO
from urllib.parse import urlsplit
from urllib.request import url2pathname

from common.http_client import safe_get
from .base import UriLocator
from .filesystem import open_file

SUPPORTED_SCHEMES = ("http", "https", "file")


class UrlUriLocator(UriLocator):
    """Fetches absolute URLs."""

    name = "url"

    def accepts(self, uri: str) -> bool:
        scheme = urlsplit(uri).scheme.lower()
        return scheme in SUPPORTED_SCHEMES and "://" in uri

    def locate(self, uri: str) -> BinaryIO:
        parts = urlsplit(uri)
        if parts.scheme.lower() == "file":
            return open_file(Path(url2pathname(parts.path)), uri)
        return io.BytesIO(safe_get(uri, context="url_locator"))
