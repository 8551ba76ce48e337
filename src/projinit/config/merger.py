"""
Settings merger for projinit.

Deep merge of layered settings dictionaries plus dotted-path helpers.
"""

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Merge rules:
    - Scalar values and lists: override replaces base
    - Dicts: recursive deep merge
    - null/None value: remove key from result

    Args:
        base: Base settings dictionary.
        override: Override settings dictionary.

    Returns:
        Merged dictionary. Neither input is modified.

    Examples:
        >>> deep_merge({"animation": {"smooth_fps": 60}}, {"animation": {"enabled": False}})
        {'animation': {'smooth_fps': 60, 'enabled': False}}
    """
    result = base.copy()

    for key, value in override.items():
        if value is None:
            result.pop(key, None)
        elif isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def set_nested_value(config: dict[str, Any], key_path: str, value: Any) -> dict[str, Any]:
    """
    Set a nested value by dot-separated path, creating dictionaries as needed.

    Examples:
        >>> set_nested_value({}, "defaults.language", "Go")
        {'defaults': {'language': 'Go'}}
    """
    keys = key_path.split(".")
    current = config

    for key in keys[:-1]:
        if key not in current or not isinstance(current[key], dict):
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value
    return config
