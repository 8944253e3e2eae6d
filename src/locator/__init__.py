"""URI locator strategies and the chain that combines them."""

from .base import UriLocator
from .chain import LocatorChain, default_locator_chain
from .classpath import ClasspathUriLocator
from .context import ContextUriLocator
from .filesystem import FileSystemUriLocator
from .url import UrlUriLocator

__all__ = [
    "UriLocator",
    "LocatorChain",
    "default_locator_chain",
    "ClasspathUriLocator",
    "ContextUriLocator",
    "FileSystemUriLocator",
    "UrlUriLocator",
]
