"""Configuration loading: YAML/JSON files, environment and KEY=VALUE overrides."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Iterable, Mapping, Optional

import yaml

from constants import Constants
from errors import ConfigurationError
from .settings import MergeConfiguration

logger = logging.getLogger(__name__)

# Top-level section holding merge settings; files without it are read as-is.
CONFIG_SECTION = "assetmerge"


def load_config_file(path: str) -> Dict[str, Any]:
    """Read a YAML or JSON config file into a dict.

    Args:
        path: Path to a ``.yml``, ``.yaml`` or ``.json`` file.

    Returns:
        The ``assetmerge`` section if present, otherwise the whole document.

    Raises:
        ConfigurationError: Missing file, unsupported extension or invalid content.
    """
    lower = path.lower()
    if not lower.endswith(Constants.CONFIG_EXTENSIONS):
        raise ConfigurationError(f"Unsupported config file type: {path}")
    try:
        with open(path, "r", encoding="utf-8") as fh:
            if lower.endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Config file not found: {path}") from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Invalid config file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{CONFIG_SECTION}' section of {path} must be a mapping")
    logger.debug("Loaded config file %s (%d keys)", path, len(section))
    return section


def _coerce_value(text: str) -> Any:
    """Best-effort convert string to JSON/number/bool, else raw string."""
    s = str(text).strip()
    try:
        return json.loads(s)
    except ValueError:
        sl = s.lower()
        if sl in ("true", "yes", "on"):
            return True
        if sl in ("false", "no", "off"):
            return False
        return s


def parse_overrides(pairs: Iterable[str]) -> Dict[str, Any]:
    """Turn ``KEY=VALUE`` strings into a dict with coerced values.

    Raises:
        ConfigurationError: A pair lacks ``=`` or has an empty key.
    """
    overrides: Dict[str, Any] = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise ConfigurationError(f"Override must be KEY=VALUE: {pair}")
        key, value = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise ConfigurationError(f"Override has an empty key: {pair}")
        overrides[key] = _coerce_value(value)
    return overrides


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    encoding = environ.get(Constants.ENV_ENCODING)
    if encoding and encoding.strip():
        overrides["encoding"] = encoding.strip()
    level = environ.get(Constants.ENV_LOG_LEVEL)
    if level and level.strip():
        overrides["log_level"] = level.strip().upper()
    return overrides


def load_configuration(
    path: Optional[str] = None,
    overrides: Optional[Iterable[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> MergeConfiguration:
    """Build the effective configuration.

    Precedence (lowest to highest): defaults, config file, environment,
    ``KEY=VALUE`` overrides. CLI flags are applied afterwards by the caller.
    """
    data: Dict[str, Any] = {}
    if path:
        data.update(load_config_file(path))
    data.update(_env_overrides(os.environ if environ is None else environ))
    data.update(parse_overrides(overrides or []))
    return MergeConfiguration.from_mapping(data)
