"""Processor registrations with their capability tags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, Optional, Union

from model.resource import ResourceType

TypeRestriction = Optional[Union[ResourceType, Iterable[ResourceType]]]


def _as_type_set(applies_to: TypeRestriction) -> Optional[FrozenSet[ResourceType]]:
    if applies_to is None:
        return None
    if isinstance(applies_to, ResourceType):
        return frozenset({applies_to})
    types = frozenset(applies_to)
    if not types:
        raise ValueError("applies_to must name at least one resource type")
    return types


@dataclass(frozen=True)
class ProcessorDescriptor:
    """A processor plus the tags deciding when it runs.

    Attributes:
        processor: The pre- or post-processor instance.
        applies_to: Resource types the processor handles; None means any.
        minimize: True for minifiers, which only run in minimized builds.
    """
    processor: Any
    applies_to: Optional[FrozenSet[ResourceType]] = None
    minimize: bool = False

    @classmethod
    def of(cls, processor: Any, applies_to: TypeRestriction = None,
           minimize: bool = False) -> "ProcessorDescriptor":
        """Build a descriptor, accepting a single type or any iterable of types."""
        return cls(processor=processor, applies_to=_as_type_set(applies_to), minimize=minimize)

    def applies(self, resource_type: Optional[ResourceType], minimize: bool) -> bool:
        """Whether this step runs for content of ``resource_type``.

        A None type (mixed group) only matches processors without a type
        restriction.
        """
        if self.minimize and not minimize:
            return False
        if self.applies_to is None:
            return True
        return resource_type in self.applies_to

    @property
    def name(self) -> str:
        """Class name of the wrapped processor, for logs."""
        return type(self.processor).__name__
