"""Merge configuration and its call-scoped provider."""

from .settings import MergeConfiguration
from .context import config_scope, current_config
from .loader import load_config_file, load_configuration, parse_overrides

__all__ = [
    "MergeConfiguration",
    "config_scope",
    "current_config",
    "load_config_file",
    "load_configuration",
    "parse_overrides",
]
