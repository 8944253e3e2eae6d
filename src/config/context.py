"""Call-scoped configuration provider.

The active configuration lives in a ContextVar so that concurrent builds on
different threads or tasks each see their own settings.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from .settings import MergeConfiguration

_DEFAULT_CONFIG = MergeConfiguration()
_config_ctx: ContextVar[Optional[MergeConfiguration]] = ContextVar("merge_config", default=None)


def current_config() -> MergeConfiguration:
    """Return the configuration of the current call, or the defaults."""
    return _config_ctx.get() or _DEFAULT_CONFIG


@contextmanager
def config_scope(config: MergeConfiguration) -> Iterator[MergeConfiguration]:
    """Make ``config`` the current configuration for the duration of the block."""
    token = _config_ctx.set(config)
    try:
        yield config
    finally:
        _config_ctx.reset(token)
