"""Ordered chain of locator strategies.

The chain is read-only once built and can be shared across concurrent
builds.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional, Union

from common.logging_utils import extra_context, is_debug_enabled
from errors import ResourceIOError, ResourceNotFoundError
from .base import UriLocator
from .classpath import ClasspathUriLocator
from .context import ContextUriLocator
from .filesystem import FileSystemUriLocator
from .url import UrlUriLocator

logger = logging.getLogger(__name__)


class LocatorChain:
    """Tries each strategy in order; the first one returning a stream wins."""

    def __init__(self, locators: Optional[Iterable[UriLocator]] = None):
        self._locators: List[UriLocator] = list(locators or [])

    def add_locator(self, locator: UriLocator) -> "LocatorChain":
        """Append a strategy; returns self so calls can be chained."""
        self._locators.append(locator)
        return self

    @property
    def locators(self) -> List[UriLocator]:
        """Copy of the configured strategies, in order."""
        return list(self._locators)

    def locate(self, uri: str) -> BinaryIO:
        """Open ``uri`` with the first strategy that can.

        Raises:
            ResourceNotFoundError: No strategy accepted the URI, or every
                accepting strategy reported it missing.
            ResourceIOError: An accepting strategy failed to read it.
        """
        for locator in self._locators:
            if not locator.accepts(uri):
                continue
            try:
                stream = locator.locate(uri)
            except ResourceNotFoundError:
                logger.debug("%s locator declined %s", locator.name, uri)
                continue
            if is_debug_enabled(logger):
                logger.debug(
                    "Resource located",
                    extra=extra_context(
                        event="locate",
                        component="locator_chain",
                        action=locator.name,
                        target=uri,
                        outcome="success"
                    )
                )
            return stream
        raise ResourceNotFoundError(uri)

    def read_text(self, uri: str, encoding: str) -> str:
        """Locate ``uri`` and decode its bytes with ``encoding``."""
        with self.locate(uri) as stream:
            data = stream.read()
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as exc:
            raise ResourceIOError(f"Cannot decode {uri} as {encoding}: {exc}") from exc

    def __repr__(self) -> str:
        return f"LocatorChain({self._locators!r})"


def default_locator_chain(
    context_root: Optional[Union[str, Path]] = None,
    base_dir: Union[str, Path] = ".",
) -> LocatorChain:
    """Build the standard chain: context, classpath, URL, then filesystem."""
    return (
        LocatorChain()
        .add_locator(ContextUriLocator(context_root))
        .add_locator(ClasspathUriLocator())
        .add_locator(UrlUriLocator())
        .add_locator(FileSystemUriLocator(base_dir))
    )
