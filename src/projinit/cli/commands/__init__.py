"""CLI command modules."""

from projinit.cli.commands import catalog

__all__ = ["catalog"]
