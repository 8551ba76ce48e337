"""
Option catalog for projinit.

The catalog lists languages, their starter frameworks and the optional
libraries each framework offers. It is loaded once and passed to the wizard
as an immutable value.
"""

from projinit.catalog.loader import DEFAULT_CATALOG_PATH, load_catalog, parse_catalog
from projinit.catalog.models import (
    BASELINE_FRAMEWORK,
    CatalogFile,
    FrameworkOption,
    LibraryOption,
    OptionCatalog,
    option_key,
)

__all__ = [
    "BASELINE_FRAMEWORK",
    "CatalogFile",
    "DEFAULT_CATALOG_PATH",
    "FrameworkOption",
    "LibraryOption",
    "OptionCatalog",
    "load_catalog",
    "option_key",
    "parse_catalog",
]
