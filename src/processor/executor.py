"""Runs the pre- and post-processor chains over a group of resources."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from common.logging_utils import extra_context, is_debug_enabled, Timer
from errors import ProcessingError
from locator.chain import LocatorChain
from model.resource import Resource, ResourceType
from .context import ProcessingContext
from .descriptor import ProcessorDescriptor

logger = logging.getLogger(__name__)


def _group_type(resources: Sequence[Resource]) -> Optional[ResourceType]:
    """Type shared by every resource of the group, or None when mixed/empty."""
    types = {r.type for r in resources}
    return types.pop() if len(types) == 1 else None


class ProcessorExecutor:
    """Applies the ordered processor chains; holds no per-call state."""

    def __init__(
        self,
        locator_chain: LocatorChain,
        pre_processors: Iterable[ProcessorDescriptor] = (),
        post_processors: Iterable[ProcessorDescriptor] = (),
    ):
        self._locator_chain = locator_chain
        self._pre: List[ProcessorDescriptor] = list(pre_processors)
        self._post: List[ProcessorDescriptor] = list(post_processors)

    @property
    def locator_chain(self) -> LocatorChain:
        """Chain used to read each resource before its pre-processors run."""
        return self._locator_chain

    @property
    def pre_processors(self) -> List[ProcessorDescriptor]:
        return list(self._pre)

    @property
    def post_processors(self) -> List[ProcessorDescriptor]:
        return list(self._post)

    def pre_process(self, resource: Resource, minimize: bool, context: ProcessingContext) -> str:
        """Locate one resource and run every applicable pre-processor over it."""
        content = self._locator_chain.read_text(resource.uri, context.encoding)
        for descriptor in self._pre:
            if not descriptor.applies(resource.type, minimize):
                logger.debug("Skipping %s for %s", descriptor.name, resource)
                continue
            content = self._run_step(
                descriptor,
                lambda d=descriptor, c=content: d.processor.process(resource, c, context),
                resource,
            )
        return content

    def pre_process_and_merge(
        self,
        resources: Sequence[Resource],
        minimize: bool,
        context: Optional[ProcessingContext] = None,
    ) -> str:
        """Pre-process each resource in order and concatenate the results."""
        if context is None:
            context = ProcessingContext.create()
        return "".join(self.pre_process(r, minimize, context) for r in resources)

    def post_process(
        self,
        content: str,
        resource_type: Optional[ResourceType],
        minimize: bool,
        context: ProcessingContext,
    ) -> str:
        """Run every applicable post-processor over merged content."""
        for descriptor in self._post:
            if not descriptor.applies(resource_type, minimize):
                logger.debug("Skipping post-processor %s", descriptor.name)
                continue
            content = self._run_step(
                descriptor,
                lambda d=descriptor, c=content: d.processor.process_merged(c, context),
                None,
            )
        return content

    def process_and_merge(
        self,
        resources: Sequence[Resource],
        minimize: bool,
        context: Optional[ProcessingContext] = None,
    ) -> str:
        """Pre-process, merge in input order, then post-process the group.

        Args:
            resources: Group members, in output order.
            minimize: When False, minimize-tagged processors are skipped.
            context: Per-call state; a fresh one is created when omitted.

        Returns:
            The final group content.
        """
        if context is None:
            context = ProcessingContext.create()
        resources = list(resources)
        with Timer() as t:
            merged = self.pre_process_and_merge(resources, minimize, context)
            result = self.post_process(merged, _group_type(resources), minimize, context)
        if is_debug_enabled(logger):
            logger.debug(
                "Group processed",
                extra=extra_context(
                    event="process_and_merge",
                    component="executor",
                    action="merge",
                    outcome="success",
                    resource_count=len(resources),
                    duration_ms=t.duration_ms()
                )
            )
        return result

    @staticmethod
    def _run_step(
        descriptor: ProcessorDescriptor,
        step: Callable[[], str],
        resource: Optional[Resource],
    ) -> str:
        """Run one processor, wrapping non-I/O failures in ProcessingError."""
        target = str(resource) if resource is not None else "merged content"
        try:
            result = step()
        except IOError:
            raise
        except Exception as exc:  # pylint: disable=broad-exception-caught
            raise ProcessingError(
                f"{descriptor.name} failed on {target}: {exc}", resource
            ) from exc
        if not isinstance(result, str):
            raise ProcessingError(
                f"{descriptor.name} returned {type(result).__name__} instead of str for {target}",
                resource,
            )
        return result
