"""URI path helpers shared by locators and CSS processors.

All helpers work on ``/``-separated URIs; backslashes are treated as
separators too so Windows-style paths resolve the same way.
"""

from __future__ import annotations

import re
from typing import Tuple

# "scheme://authority" or "scheme:" (at least two letters, so "C:" stays a path)
_PREFIX_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]+:(?://[^/]*)?)")


def _split_prefix(uri: str) -> Tuple[str, str]:
    m = _PREFIX_RE.match(uri)
    if not m:
        return "", uri
    return m.group(1), uri[m.end():]


def is_absolute_url(uri: str) -> bool:
    """True when the URI carries a scheme (``http:``, ``classpath:``, ...)."""
    return bool(_PREFIX_RE.match(uri.strip()))


def get_full_path(uri: str) -> str:
    """Return the directory portion of a URI, including the trailing separator.

    ``css/sub/a.css`` -> ``css/sub/``; ``a.css`` -> ``""``.
    """
    uri = uri.replace("\\", "/")
    idx = uri.rfind("/")
    if idx < 0:
        prefix, _ = _split_prefix(uri)
        return prefix
    return uri[:idx + 1]


def normalize_path(path: str) -> str:
    """Collapse ``.`` and ``..`` segments and duplicate separators.

    A scheme prefix (``classpath:``, ``http://host``) is kept untouched.
    Leading ``..`` segments of a relative path are preserved; on a rooted
    path they are dropped since there is nothing above the root.
    """
    prefix, rest = _split_prefix(path.replace("\\", "/"))
    rooted = rest.startswith("/")
    trailing = rest.endswith("/") and len(rest) > 1

    stack = []
    for segment in rest.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if stack and stack[-1] != "..":
                stack.pop()
            elif not rooted:
                stack.append(segment)
            continue
        stack.append(segment)

    normalized = "/".join(stack)
    if rooted:
        normalized = "/" + normalized
    if trailing and stack:
        normalized += "/"
    return prefix + normalized
