"""Data models for resources and the directives discovered inside them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from constants import Constants


class ResourceType(Enum):
    """Enum for supported resource types."""
    CSS = "css"
    JS = "js"

    @classmethod
    def from_uri(cls, uri: str) -> "ResourceType":
        """Infer the type from the URI's extension (query string ignored).

        Raises:
            ValueError: When the extension is neither CSS nor JS.
        """
        path = uri.split("?", 1)[0].split("#", 1)[0].lower()
        if path.endswith(Constants.CSS_EXTENSIONS):
            return cls.CSS
        if path.endswith(Constants.JS_EXTENSIONS):
            return cls.JS
        raise ValueError(f"Cannot infer resource type from URI: {uri}")


@dataclass(frozen=True)
class Resource:
    """An addressable asset; equality and hashing are by (uri, type)."""
    uri: str
    type: ResourceType

    @classmethod
    def create(cls, uri: str, resource_type: ResourceType) -> "Resource":
        """Build a resource, stripping surrounding whitespace from the URI."""
        return cls(uri=uri.strip(), type=resource_type)

    @classmethod
    def from_uri(cls, uri: str) -> "Resource":
        """Build a resource whose type is inferred from the URI extension."""
        return cls.create(uri, ResourceType.from_uri(uri))

    def __str__(self) -> str:
        return f"{self.type.name}:{self.uri}"


@dataclass(frozen=True)
class ImportDirective:
    """An ``@import`` occurrence found while scanning a stylesheet."""
    raw_match: str  # full directive text, used for removal
    target_url: str  # URL as written, possibly relative
