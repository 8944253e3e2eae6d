"""Recursive ``@import`` expansion for stylesheets.

Every import found in a stylesheet is resolved against the importing
resource's folder, fully pre-processed (minimized) through the executor and
inlined ahead of the importer's own content, which has its directives
removed. Recursion goes executor -> pre-processor chain -> this resolver for
each imported resource.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, TYPE_CHECKING

from common.logging_utils import extra_context, is_debug_enabled
from common.paths import get_full_path, is_absolute_url, normalize_path
from model.resource import ImportDirective, Resource, ResourceType
from processor.base import ResourcePreProcessor
from processor.context import ProcessingContext

if TYPE_CHECKING:
    from locator.chain import LocatorChain
    from processor.executor import ProcessorExecutor

logger = logging.getLogger(__name__)

IMPORT_PATTERN = re.compile(
    r"""@import\s*
        (?:url\(\s*)?          # optional url( wrapper
        (?:
            (?P<quote>["'])(?P<quoted>[^"']+)(?P=quote)
          | (?P<bare>[^"'()\s;]+)
        )
        (?:\s*\))?
        (?:\s*;)?""",
    re.IGNORECASE | re.VERBOSE,
)

# Any @import keyword; used to spot directives the strict pattern rejected.
_ANY_IMPORT = re.compile(r"@import\b", re.IGNORECASE)


def parse_directives(css: str) -> List[ImportDirective]:
    """Return every well-formed ``@import`` directive in ``css``, in order."""
    return [
        ImportDirective(raw_match=m.group(0), target_url=m.group("quoted") or m.group("bare"))
        for m in IMPORT_PATTERN.finditer(css)
    ]


def compute_absolute_url(importer: Resource, import_url: str) -> str:
    """Resolve ``import_url`` against the folder of the importing resource.

    URLs carrying a scheme or rooted at ``/`` are only normalized.
    """
    import_url = import_url.strip()
    if is_absolute_url(import_url) or import_url.startswith("/"):
        return normalize_path(import_url)
    return normalize_path(get_full_path(importer.uri) + import_url)


class CssImportPreProcessor(ResourcePreProcessor):
    """Inlines imported stylesheets, depth-first, in declaration order.

    The resolver keeps no per-call state: cycle detection uses the import
    ancestry carried by the ProcessingContext, so one instance can serve
    concurrent, unrelated calls.
    """

    def __init__(
        self,
        locator_chain: Optional["LocatorChain"] = None,
        executor: Optional["ProcessorExecutor"] = None,
    ):
        self._locator_chain = locator_chain
        self._executor = executor

    def bind(
        self,
        locator_chain: Optional["LocatorChain"] = None,
        executor: Optional["ProcessorExecutor"] = None,
    ) -> "CssImportPreProcessor":
        """Inject collaborators after construction (the executor usually owns this resolver)."""
        if locator_chain is not None:
            self._locator_chain = locator_chain
        if executor is not None:
            self._executor = executor
        return self

    def _validate(self) -> None:
        if self._locator_chain is None:
            raise RuntimeError("No locator chain was injected")
        if self._executor is None:
            raise RuntimeError("No processor executor was injected")

    def process(
        self,
        resource: Resource,
        content: str,
        context: Optional[ProcessingContext] = None,
    ) -> str:
        """Expand the imports of ``resource`` and strip them from ``content``.

        Args:
            resource: The stylesheet being processed.
            content: Its content as delivered by earlier pipeline steps.
            context: Per-call state; omit it to start a new top-level call.

        Returns:
            Expanded imports followed by ``content`` without its directives.
            Empty when ``resource`` is already on the current import path.
        """
        self._validate()
        if context is None:
            context = ProcessingContext.create()
        if resource in context.visited:
            context.warn(logger, "Recursive import detected: %s", resource)
            return ""
        child = context.descend(resource)

        imports = self.find_imported_resources(resource, child)
        imported = ""
        if imports:
            logger.debug("Imported resources found for %s: %d", resource, len(imports))
            imported = self._executor.pre_process_and_merge(imports, True, child)
        if is_debug_enabled(logger):
            logger.debug(
                "Imports expanded",
                extra=extra_context(
                    event="css_import",
                    component="css_import",
                    action="expand",
                    target=resource.uri,
                    import_count=len(imports),
                    depth=context.depth,
                    outcome="success"
                )
            )
        return imported + self.remove_import_statements(content, resource, context)

    def find_imported_resources(self, resource: Resource, context: ProcessingContext) -> List[Resource]:
        """Scan the resource's source for imports; sibling duplicates are dropped.

        The source is read through the locator chain rather than taken from
        the pipeline, so earlier transforms cannot hide or alter directives.
        """
        css = self._locator_chain.read_text(resource.uri, context.encoding)
        imports: List[Resource] = []
        for directive in parse_directives(css):
            imported = Resource.create(compute_absolute_url(resource, directive.target_url),
                                       ResourceType.CSS)
            if imported in imports:
                context.warn(logger, "Duplicate imported resource: %s (in %s)", imported, resource)
                continue
            imports.append(imported)
        return imports

    @staticmethod
    def remove_import_statements(
        content: str,
        resource: Optional[Resource] = None,
        context: Optional[ProcessingContext] = None,
    ) -> str:
        """Remove every well-formed directive; leftover ``@import`` text is reported."""
        result = IMPORT_PATTERN.sub("", content)
        if _ANY_IMPORT.search(result):
            msg, args = "Malformed @import directive left in place in %s", (resource or "content",)
            if context is not None:
                context.warn(logger, msg, *args)
            else:
                logger.warning(msg, *args)
        return result
