"""Package-resource locator for ``classpath:`` URIs.

``classpath:mypkg/static/site.css`` reads ``static/site.css`` shipped inside
the importable package ``mypkg`` (dotted names such as ``a.b`` also work).
"""

from __future__ import annotations

import io
import logging
from importlib import resources
from typing import BinaryIO, Tuple

from constants import Constants
from common.paths import normalize_path
from errors import ResourceIOError, ResourceNotFoundError
from .base import UriLocator

logger = logging.getLogger(__name__)


def _split(uri: str) -> Tuple[str, str]:
    path = normalize_path(uri[len(Constants.CLASSPATH_PREFIX):]).lstrip("/")
    package, _, remainder = path.partition("/")
    return package, remainder


class ClasspathUriLocator(UriLocator):
    """Reads resources bundled inside Python packages."""

    name = "classpath"

    def accepts(self, uri: str) -> bool:
        return uri.lower().startswith(Constants.CLASSPATH_PREFIX)

    def locate(self, uri: str) -> BinaryIO:
        package, remainder = _split(uri)
        if not package or not remainder:
            raise ResourceNotFoundError(uri, f"Malformed classpath URI: {uri}")
        try:
            resource = resources.files(package)
        except (ModuleNotFoundError, TypeError) as exc:
            raise ResourceNotFoundError(uri) from exc
        for part in remainder.split("/"):
            resource = resource.joinpath(part)
        if not resource.is_file():
            raise ResourceNotFoundError(uri)
        logger.debug("Locating %s in package %s", remainder, package)
        try:
            return io.BytesIO(resource.read_bytes())
        except OSError as exc:
            raise ResourceIOError(f"Cannot read {uri}: {exc}") from exc
