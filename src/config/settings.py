"""Runtime configuration for a merge build."""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

from constants import Constants
from errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeConfiguration:
    """Settings consumed by locators and processors during one build.

    Attributes:
        encoding: Character encoding used to decode every located resource.
        minimize: Whether minimize-tagged processors run for top-level groups.
        context_root: Web root directory serving ``/``-rooted URIs, if any.
        base_dir: Directory that relative filesystem URIs are resolved against.
        log_level: Logging level name applied by the CLI.
        log_file: Optional log file path.
    """
    encoding: str = Constants.DEFAULT_ENCODING
    minimize: bool = True
    context_root: Optional[str] = None
    base_dir: str = "."
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("encoding", "base_dir", "log_level"):
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(f"'{name}' must be a string, got {getattr(self, name)!r}")
        for name in ("context_root", "log_file"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"'{name}' must be a string, got {value!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigurationError(f"Unknown encoding: {self.encoding}") from exc

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "MergeConfiguration":
        """Build a configuration from a plain mapping; unknown keys are logged and ignored."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(k for k in data if k not in known)
        if unknown:
            logger.warning("Ignoring unknown configuration key(s): %s", ", ".join(unknown))
        kwargs = {k: v for k, v in data.items() if k in known}
        if "minimize" in kwargs and not isinstance(kwargs["minimize"], bool):
            raise ConfigurationError("'minimize' must be a boolean")
        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> "MergeConfiguration":
        """Return a copy with the given non-None fields replaced."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self
