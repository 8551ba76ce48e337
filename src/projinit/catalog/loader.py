"""
Catalog loader for projinit.

Reads the option catalog from YAML. Without an explicit path the catalog
bundled with the package is used.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from projinit.catalog.models import CatalogFile, OptionCatalog
from projinit.errors import CatalogError

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "defaults" / "catalog.yaml"


def parse_catalog(data: dict | None, source: str = "<catalog>") -> OptionCatalog:
    """
    Validate a catalog dictionary and freeze it.

    Args:
        data: Parsed YAML content.
        source: Where the data came from, for error messages.

    Returns:
        The frozen option catalog.

    Raises:
        CatalogError: If the data does not match the catalog layout.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog {source} must be a mapping, got {type(data).__name__}")

    try:
        catalog_file = CatalogFile.model_validate(data)
    except PydanticValidationError as e:
        raise CatalogError(f"Invalid catalog {source}: {e}") from e

    catalog = OptionCatalog.from_frameworks(catalog_file.frameworks)
    logger.debug(
        f"Loaded catalog {source}: {len(catalog.languages())} languages, "
        f"{len(catalog.entries)} frameworks"
    )
    return catalog


def load_catalog(path: Path | None = None) -> OptionCatalog:
    """
    Load the option catalog from a YAML file.

    Args:
        path: Catalog file. Defaults to the bundled catalog.

    Returns:
        The frozen option catalog.

    Raises:
        CatalogError: If the file cannot be read or is malformed.
    """
    path = path or DEFAULT_CATALOG_PATH
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog not found: {path}") from e
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise CatalogError(f"Cannot read {path}: {e}") from e

    return parse_catalog(content, source=str(path))
