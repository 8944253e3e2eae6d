"""Inlines small images and fonts referenced by ``url(...)`` as data URIs."""

from __future__ import annotations

import base64
import logging
import mimetypes
import re
from typing import Optional, TYPE_CHECKING

from constants import Constants
from errors import ResourceIOError, ResourceNotFoundError
from processor.base import ResourcePreProcessor
from .css_import import compute_absolute_url
from .css_url_rewriting import URL_PATTERN

if TYPE_CHECKING:
    from locator.chain import LocatorChain

logger = logging.getLogger(__name__)

_SKIPPED_PREFIXES = ("data:", "#", "about:", "blob:")
_INLINED_MEDIA = ("image/", "font/")


def guess_mime_type(uri: str) -> Optional[str]:
    """Mime type of an image or font URI, ignoring query and fragment; None otherwise."""
    path = re.split(r"[?#]", uri, maxsplit=1)[0]
    mime_type, _ = mimetypes.guess_type(path)
    if mime_type and mime_type.startswith(_INLINED_MEDIA):
        return mime_type
    return None


def to_data_uri(mime_type: str, data: bytes) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


class CssDataUriPreProcessor(ResourcePreProcessor):
    """Replaces ``url()`` references with base64 data URIs.

    Targets are resolved against the stylesheet's folder and read through the
    locator chain. References that cannot be read, have no image/font type or
    exceed ``Constants.DATA_URI_SIZE_LIMIT`` bytes are left untouched.
    """

    def __init__(self, locator_chain: Optional["LocatorChain"] = None,
                 size_limit: int = Constants.DATA_URI_SIZE_LIMIT):
        self._locator_chain = locator_chain
        self._size_limit = size_limit

    def bind(self, locator_chain: "LocatorChain") -> "CssDataUriPreProcessor":
        """Inject the locator chain after construction."""
        self._locator_chain = locator_chain
        return self

    def process(self, resource, content, context):
        if self._locator_chain is None:
            raise RuntimeError("No locator chain was injected")

        def _replace(m: re.Match) -> str:
            url = m.group("url").strip()
            data_uri = self._inline(resource, url)
            if data_uri is None:
                return m.group(0)
            quote = m.group("quote")
            return f"url({quote}{data_uri}{quote})"

        return URL_PATTERN.sub(_replace, content)

    def _inline(self, resource, url: str) -> Optional[str]:
        if not url or url.lower().startswith(_SKIPPED_PREFIXES):
            return None
        mime_type = guess_mime_type(url)
        if mime_type is None:
            return None
        target = compute_absolute_url(resource, url)
        try:
            with self._locator_chain.locate(target) as stream:
                data = stream.read(self._size_limit + 1)
        except (ResourceNotFoundError, ResourceIOError) as exc:
            logger.warning("Cannot inline %s referenced by %s: %s", target, resource, exc)
            return None
        if len(data) > self._size_limit:
            logger.debug("Not inlining %s: larger than %d bytes", target, self._size_limit)
            return None
        logger.debug("Inlined %s (%d bytes) in %s", target, len(data), resource)
        return to_data_uri(mime_type, data)
