"""Processor contracts.

A pre-processor transforms one resource's content before merging; a
post-processor transforms the merged content of a whole group. A class may
implement both.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from model.resource import Resource
    from .context import ProcessingContext


class ResourcePreProcessor:
    """Base class for per-resource transforms."""

    def process(self, resource: "Resource", content: str, context: "ProcessingContext") -> str:
        """Transform the content of ``resource``.

        Args:
            resource: The resource being processed.
            content: Its content as produced by the previous step.
            context: Per-call state (encoding, import ancestry, warnings).

        Returns:
            The transformed content.
        """
        raise NotImplementedError


class ResourcePostProcessor:
    """Base class for transforms applied to merged group content."""

    def process_merged(self, content: str, context: "ProcessingContext") -> str:
        """Transform merged content; no single resource identity is available."""
        raise NotImplementedError
