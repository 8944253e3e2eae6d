"""Resource data model."""

from .resource import ImportDirective, Resource, ResourceType

__all__ = [
    "ImportDirective",
    "Resource",
    "ResourceType",
]
