"""Rewrites relative ``url(...)`` references of a stylesheet.

Once stylesheets from different folders are merged, a relative reference
like ``url(img/bg.png)`` in ``css/theme/a.css`` must become
``url(css/theme/img/bg.png)`` to keep pointing at the same file.
"""

from __future__ import annotations

import logging
import re

from common.paths import get_full_path, is_absolute_url, normalize_path
from processor.base import ResourcePreProcessor

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"""url\(\s*(?P<quote>["']?)(?P<url>.*?)(?P=quote)\s*\)""", re.IGNORECASE)

_UNTOUCHED_PREFIXES = ("data:", "#", "/", "about:", "blob:")


def rewrite_url(resource_uri: str, url: str) -> str:
    """Return ``url`` made relative to the root the resource URI is expressed against."""
    stripped = url.strip()
    if not stripped or stripped.lower().startswith(_UNTOUCHED_PREFIXES) or is_absolute_url(stripped):
        return url
    return normalize_path(get_full_path(resource_uri) + stripped)


class CssUrlRewritingProcessor(ResourcePreProcessor):
    """Prefixes relative ``url()`` targets with the folder of their stylesheet."""

    def process(self, resource, content, context):
        def _replace(m: re.Match) -> str:
            quote = m.group("quote")
            rewritten = rewrite_url(resource.uri, m.group("url"))
            return f"url({quote}{rewritten}{quote})"

        result = URL_PATTERN.sub(_replace, content)
        if result != content:
            logger.debug("Rewrote relative urls in %s", resource)
        return result
