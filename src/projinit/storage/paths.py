"""
Path utilities for projinit.

Provides consistent path resolution for the settings and log files.
"""

import os
from pathlib import Path


def get_projinit_home() -> Path:
    """
    Get the projinit home directory.

    Resolution order:
    1. PROJINIT_HOME environment variable
    2. Default: ~/.projinit

    Returns:
        Path to the projinit home directory.
    """
    env_home = os.environ.get("PROJINIT_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".projinit"


def get_global_config_path() -> Path:
    """
    Get the path to the settings file.

    Returns:
        Path to ~/.projinit/config.yaml
    """
    return get_projinit_home() / "config.yaml"


def get_log_path() -> Path:
    """
    Get the path to the debug log written with --verbose.

    Returns:
        Path to ~/.projinit/projinit.log
    """
    return get_projinit_home() / "projinit.log"
