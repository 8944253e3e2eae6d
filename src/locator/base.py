"""Base class for URI locator strategies."""

from __future__ import annotations

from typing import BinaryIO


class UriLocator:
    """A strategy turning a URI into a readable byte stream.

    Subclasses decide from the URI's scheme or shape whether they handle it.
    ``locate`` raises ``ResourceNotFoundError`` when an accepted URI does not
    exist, which the chain treats as this strategy declining.
    """

    #: Short tag used in log records.
    name = "base"

    def accepts(self, uri: str) -> bool:
        """Return True if this strategy recognizes the URI."""
        raise NotImplementedError

    def locate(self, uri: str) -> BinaryIO:
        """Open the URI; the caller owns (and closes) the returned stream."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
