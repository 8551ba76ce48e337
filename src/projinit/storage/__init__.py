"""Filesystem locations used by projinit."""

from projinit.storage.paths import get_global_config_path, get_log_path, get_projinit_home

__all__ = ["get_global_config_path", "get_log_path", "get_projinit_home"]
