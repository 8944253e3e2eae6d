"""Shared HTTP helper used by the URL locator.

Encapsulates request/timeout error handling so locator code does not
duplicate try/except blocks. Failures are raised as typed errors instead of
terminating the process; the CLI decides how to exit.
"""
from __future__ import annotations

import logging
from typing import Any

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer
from errors import RemoteResourceError, ResourceNotFoundError

logger = logging.getLogger(__name__)


def safe_get(url: str, *, context: str, **kwargs: Any) -> bytes:
    """Perform a GET request and return the response body.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., "url_locator").
        **kwargs: Passed through to requests.get.

    Returns:
        bytes: The raw response body.

    Raises:
        ResourceNotFoundError: The server answered 404 or 410.
        RemoteResourceError: Timeout, connection failure or any other non-2xx status.
    """
    safe_target = safe_url(url)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context
                )
            )
        try:
            res = requests.get(url, timeout=Constants.REQUEST_TIMEOUT, **kwargs)
        except requests.Timeout as exc:
            logger.error(
                "%s request timed out after %s seconds",
                context,
                Constants.REQUEST_TIMEOUT,
            )
            raise RemoteResourceError(f"Timed out fetching {safe_target}") from exc
        except requests.RequestException as exc:  # includes ConnectionError
            logger.error("%s connection error: %s", context, exc)
            raise RemoteResourceError(f"Connection error fetching {safe_target}: {exc}") from exc

        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    outcome="success" if res.ok else "http_error",
                    status_code=res.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    context=context
                )
            )

    if res.status_code in (404, 410):
        raise ResourceNotFoundError(url)
    if not res.ok:
        raise RemoteResourceError(f"HTTP {res.status_code} fetching {safe_target}")
    return res.content
