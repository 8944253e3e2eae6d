"""Processor registration."""

from __future__ import annotations

from typing import Any, List

from .descriptor import ProcessorDescriptor, TypeRestriction


class ProcessorsFactory:
    """Collects pre- and post-processors, in registration order, with their tags."""

    def __init__(self) -> None:
        self._pre: List[ProcessorDescriptor] = []
        self._post: List[ProcessorDescriptor] = []

    def add_pre_processor(self, processor: Any, applies_to: TypeRestriction = None,
                          minimize: bool = False) -> "ProcessorsFactory":
        """Register a pre-processor; returns self so calls can be chained."""
        if not callable(getattr(processor, "process", None)):
            raise TypeError(f"{type(processor).__name__} is not a pre-processor")
        self._pre.append(ProcessorDescriptor.of(processor, applies_to, minimize))
        return self

    def add_post_processor(self, processor: Any, applies_to: TypeRestriction = None,
                           minimize: bool = False) -> "ProcessorsFactory":
        """Register a post-processor; returns self so calls can be chained."""
        if not callable(getattr(processor, "process_merged", None)):
            raise TypeError(f"{type(processor).__name__} is not a post-processor")
        self._post.append(ProcessorDescriptor.of(processor, applies_to, minimize))
        return self

    @property
    def pre_processors(self) -> List[ProcessorDescriptor]:
        return list(self._pre)

    @property
    def post_processors(self) -> List[ProcessorDescriptor]:
        return list(self._post)
