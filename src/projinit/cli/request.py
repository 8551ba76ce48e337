"""
Scaffold request assembly.

Combines command-line flags, settings defaults and (when needed) the wizard's
answers into the request handed to the scaffolding step.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from projinit.catalog import OptionCatalog, option_key
from projinit.config.schema import Settings
from projinit.errors import ValidationError
from projinit.wizard.state import WizardResult

logger = logging.getLogger(__name__)

# (catalog, settings, default_language, default_framework, default_name) -> result
WizardRunner = Callable[[OptionCatalog, Settings, str, str, str], WizardResult | None]

# Characters kept in a project slug; runs of anything else become "-".
SLUG_INVALID = re.compile(r"[^a-zA-Z0-9-_]+")

NEXT_STEP_COMMANDS = {
    "go": "go mod tidy",
    "node.js": "npm install",
    "bun": "bun install",
    "python": "pip install -r requirements.txt",
}


@dataclass
class ScaffoldRequest:
    """What to create and where."""

    language: str
    framework: str
    name: str
    dir: str = "."
    libraries: tuple[str, ...] = field(default_factory=tuple)

    @property
    def slug(self) -> str:
        return slugify(self.name)

    @property
    def project_dir(self) -> Path:
        """Project folder: ``<dir>/<language>/<slug>``."""
        return Path(self.dir) / language_dir(self.language) / self.slug

    def next_step_command(self) -> str:
        """Command to run inside the new project, if the language has one."""
        return NEXT_STEP_COMMANDS.get(self.language.strip().lower(), "")

    def to_dict(self) -> dict:
        return {
            "language": self.language,
            "framework": self.framework,
            "name": self.name,
            "dir": self.dir,
            "slug": self.slug,
            "project_dir": str(self.project_dir),
            "libraries": list(self.libraries),
        }


def slugify(value: str) -> str:
    """Lower-case, dash-separated folder name; "project" if nothing is left."""
    value = value.strip().lower().replace(" ", "-")
    value = SLUG_INVALID.sub("-", value).strip("-_")
    return value or "project"


def language_dir(language: str) -> str:
    """Folder grouping projects of one language, path separators replaced."""
    value = language.strip().replace("/", "-").replace("\\", "-").strip()
    return value or "language"


def first_non_empty(*values: str | None) -> str:
    """Return the first value that is not blank, stripped."""
    for value in values:
        if value is None:
            continue
        value = value.strip()
        if value:
            return value
    return ""


def validate_request(request: ScaffoldRequest, catalog: OptionCatalog) -> ScaffoldRequest:
    """
    Check a request against the catalog.

    Language, framework and library names are rewritten to their catalog
    spelling.

    Raises:
        ValidationError: If the name is blank, the language or framework is
            not in the catalog, or a library is not offered for the framework.
    """
    name = request.name.strip()
    if not name:
        raise ValidationError("name", "project name is required")

    language = catalog.canonical_language(request.language)
    if language is None:
        known = ", ".join(catalog.languages())
        raise ValidationError("language", f"unknown language '{request.language}' (known: {known})")

    option = catalog.find_framework(language, request.framework)
    if option is None:
        known = ", ".join(catalog.frameworks_for(language))
        raise ValidationError(
            "framework",
            f"unknown framework '{request.framework}' for {language} (known: {known})",
        )
    framework = option.name.strip()

    offered = {option_key(lib.name): lib.name for lib in catalog.libraries_for(language, framework)}
    libraries = []
    for library in request.libraries:
        if option_key(library) not in offered:
            raise ValidationError(
                "libraries", f"library '{library}' is not offered for {language} / {framework}"
            )
        libraries.append(offered[option_key(library)])

    return ScaffoldRequest(
        language=language,
        framework=framework,
        name=name,
        dir=request.dir,
        libraries=tuple(libraries),
    )


def build_request(
    catalog: OptionCatalog,
    settings: Settings,
    run_wizard: WizardRunner,
    language: str | None = None,
    framework: str | None = None,
    name: str | None = None,
    dir: str | None = None,
    no_tui: bool = False,
) -> ScaffoldRequest | None:
    """
    Build the scaffold request.

    Args:
        catalog: Option catalog.
        settings: Loaded settings, for defaults.
        run_wizard: Called when the wizard has to ask for missing values.
        language: --lang flag.
        framework: --framework flag.
        name: --name flag.
        dir: --dir flag.
        no_tui: Never start the wizard.

    Returns:
        The request, or None if the user cancelled the wizard.

    Raises:
        ValidationError: If the request does not match the catalog.
        WizardConfigurationError: If the wizard stopped on a fatal error.
    """
    defaults = settings.defaults
    chosen_language = first_non_empty(language, defaults.language)
    chosen_framework = first_non_empty(framework, defaults.framework)
    chosen_name = first_non_empty(name)
    chosen_dir = first_non_empty(dir, defaults.dir) or "."

    if no_tui:
        if not chosen_name:
            raise ValidationError("name", "name is required when --no-tui is set")
        request = ScaffoldRequest(chosen_language, chosen_framework, chosen_name, chosen_dir)
        return validate_request(request, catalog)

    if chosen_name and first_non_empty(language) and first_non_empty(framework):
        logger.debug("All selections given on the command line; skipping wizard")
        request = ScaffoldRequest(chosen_language, chosen_framework, chosen_name, chosen_dir)
        return validate_request(request, catalog)

    result = run_wizard(catalog, settings, chosen_language, chosen_framework, chosen_name)
    if result is None:
        logger.debug("Wizard cancelled")
        return None

    request = ScaffoldRequest(
        language=first_non_empty(language, result.language),
        framework=first_non_empty(framework, result.framework),
        name=chosen_name or result.name,
        dir=chosen_dir,
        libraries=result.libraries,
    )
    return validate_request(request, catalog)
