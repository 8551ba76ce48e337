"""
Settings loader for projinit.

Loads and merges settings from:
1. Default values
2. Settings file (~/.projinit/config.yaml, or an explicit path)
3. Environment variables (PROJINIT_*)
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from projinit.config.merger import deep_merge, set_nested_value
from projinit.config.schema import Settings
from projinit.storage.paths import get_global_config_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "PROJINIT_"

# Environment variables that are not settings overrides.
_RESERVED_ENV = {"PROJINIT_HOME"}


class ConfigurationError(Exception):
    """Raised when settings loading or validation fails."""

    pass


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML settings file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed dictionary, empty if the file does not exist.

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Settings in {path} must be a mapping")
    return content


def _parse_env_value(value: str) -> Any:
    """
    Parse an environment variable value to the appropriate type.

    Returns:
        Parsed value (bool, int, float, list or string).
    """
    if value.lower() in ("true", "yes", "on"):
        return True
    if value.lower() in ("false", "no", "off"):
        return False

    if re.match(r"^-?\d+$", value):
        return int(value)

    if re.match(r"^-?\d+\.\d+$", value):
        return float(value)

    if "," in value:
        return [item.strip() for item in value.split(",")]

    return value


def apply_env_overrides(
    config: dict[str, Any], environ: dict[str, str] | None = None
) -> dict[str, Any]:
    """
    Apply environment variable overrides.

    ``PROJINIT_<SECTION>_<KEY>=<value>`` sets ``<section>.<key>``; the key may
    itself contain underscores (``PROJINIT_ANIMATION_SMOOTH_FPS``). Top-level
    settings are addressed directly (``PROJINIT_CATALOG_PATH``).

    Args:
        config: Settings dictionary to modify.
        environ: Environment to read. Defaults to ``os.environ``.

    Returns:
        Settings with environment overrides applied.
    """
    environ = os.environ if environ is None else environ
    sections = {
        name
        for name, info in Settings.model_fields.items()
        if isinstance(info.annotation, type) and issubclass(info.annotation, BaseModel)
    }

    for key, value in environ.items():
        if not key.startswith(ENV_PREFIX) or key in _RESERVED_ENV:
            continue

        name = key[len(ENV_PREFIX) :].lower()
        section, _, rest = name.partition("_")
        if section in sections and rest:
            key_path = f"{section}.{rest}"
        else:
            key_path = name

        logger.debug(f"Settings override from {key}: {key_path}")
        config = set_nested_value(config, key_path, _parse_env_value(value))

    return config


def load_settings(
    path: Path | None = None,
    skip_env: bool = False,
) -> Settings:
    """
    Load and merge settings from all sources.

    Args:
        path: Settings file. Defaults to ~/.projinit/config.yaml.
        skip_env: Skip environment variable overrides.

    Returns:
        Validated Settings object.

    Raises:
        ConfigurationError: If a source is unreadable or the result is invalid.
    """
    config_dict = Settings().model_dump()

    settings_path = path or get_global_config_path()
    if path is not None and not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")
    config_dict = deep_merge(config_dict, load_yaml_file(settings_path))

    if not skip_env:
        config_dict = apply_env_overrides(config_dict)

    try:
        return Settings.model_validate(config_dict)
    except Exception as e:
        raise ConfigurationError(f"Settings validation failed: {e}") from e
