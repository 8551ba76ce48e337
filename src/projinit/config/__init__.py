"""
projinit settings.

Settings are layered: built-in defaults, the settings file, then PROJINIT_*
environment variables. They are read once per run and never written back.
"""

from projinit.config.loader import (
    ConfigurationError,
    apply_env_overrides,
    load_settings,
    load_yaml_file,
)
from projinit.config.merger import deep_merge, set_nested_value
from projinit.config.schema import AnimationConfig, DefaultsConfig, Settings

__all__ = [
    "AnimationConfig",
    "ConfigurationError",
    "DefaultsConfig",
    "Settings",
    "apply_env_overrides",
    "deep_merge",
    "load_settings",
    "load_yaml_file",
    "set_nested_value",
]
