"""Exception types raised while locating and processing resources."""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from model.resource import Resource


class AssetMergeError(Exception):
    """Base class for all errors raised by the merge engine."""


class ResourceNotFoundError(AssetMergeError, IOError):
    """No locator strategy could fetch the given URI."""

    def __init__(self, uri: str, message: Optional[str] = None):
        self.uri = uri
        super().__init__(message or f"Resource not found: {uri}")


class ResourceIOError(AssetMergeError, IOError):
    """A located resource could not be read."""


class ProcessingError(AssetMergeError, IOError):
    """A processor step failed for a resource (or for merged group content)."""

    def __init__(self, message: str, resource: Optional["Resource"] = None):
        self.resource = resource
        super().__init__(message)


class ConfigurationError(AssetMergeError, ValueError):
    """Invalid configuration file or value."""


class RemoteResourceError(ResourceIOError):
    """A remote (HTTP) resource could not be fetched."""
