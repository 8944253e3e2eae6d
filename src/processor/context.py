"""Per-call processing state threaded through recursive resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import FrozenSet, List, Optional

from config.context import current_config
from model.resource import Resource


@dataclass(frozen=True)
class ProcessingContext:
    """State of one top-level processing call.

    ``visited`` holds the resources on the current import path. Each
    recursive step gets its own copy through ``descend``, so sibling branches
    never see each other's entries. ``warnings`` is one list shared by the
    whole call.
    """
    encoding: str
    visited: FrozenSet[Resource] = frozenset()
    warnings: List[str] = field(default_factory=list, compare=False)

    @classmethod
    def create(cls, encoding: Optional[str] = None) -> "ProcessingContext":
        """Start a fresh call using ``encoding`` or the current configuration's."""
        return cls(encoding=encoding or current_config().encoding)

    def descend(self, resource: Resource) -> "ProcessingContext":
        """Child context for the resources imported by ``resource``."""
        return replace(self, visited=self.visited | {resource})

    @property
    def depth(self) -> int:
        """Number of importers above the current branch."""
        return len(self.visited)

    def warn(self, logger: logging.Logger, msg: str, *args) -> None:
        """Log a warning and record it for the caller."""
        logger.warning(msg, *args)
        self.warnings.append(msg % args if args else msg)
