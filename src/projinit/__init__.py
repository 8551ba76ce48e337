"""
projinit - interactive project starter wizard.

Walks through language, framework, optional libraries and a project name,
then hands the selections to the scaffolding step.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("projinit")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "__version__",
]
