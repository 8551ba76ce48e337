"""
Option catalog models for projinit.

The catalog file describes which frameworks exist per language and which
optional libraries each (language, framework) pair offers. It is parsed with
pydantic and then frozen into an :class:`OptionCatalog` value that the wizard
receives at construction time.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

BASELINE_FRAMEWORK = "Vanilla"

# Short descriptions for frameworks the catalog does not describe itself.
KNOWN_FRAMEWORK_DESCRIPTIONS = {
    "vanilla": "minimal starter",
    "cobra": "CLI app structure",
    "express": "Node.js web server",
    "hono": "lightweight web framework",
    "nestjs": "typed Node framework",
    "bun": "Bun runtime server",
    "fastapi": "Python API server",
    "laravel": "PHP web framework",
}

DEFAULT_LIBRARY_DESCRIPTION = "optional package"


def option_key(value: str) -> str:
    """Normalise a catalog name for case-insensitive lookups."""
    return value.strip().lower()


class LibraryOption(BaseModel):
    """An optional library offered for a framework."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Package name as installed")
    description: str = Field(default="", description="One-line description")


class FrameworkOption(BaseModel):
    """A starter template for one language."""

    model_config = ConfigDict(frozen=True)

    language: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = ""
    generator: str | None = Field(
        default=None,
        description="External generator used instead of built-in templates",
    )
    libraries: tuple[LibraryOption, ...] = ()


class CatalogFile(BaseModel):
    """Top-level layout of a catalog YAML file."""

    model_config = ConfigDict(extra="ignore")

    frameworks: list[FrameworkOption] = Field(default_factory=list)


@dataclass(frozen=True)
class OptionCatalog:
    """Immutable view of the selectable options.

    Language and framework lookups are case-insensitive. When the same name
    appears several times the first spelling wins and the entries merge.
    """

    entries: tuple[FrameworkOption, ...] = ()
    _languages: Mapping[str, str] = field(default_factory=dict, repr=False)
    _frameworks: Mapping[str, tuple[str, ...]] = field(default_factory=dict, repr=False)
    _libraries: Mapping[tuple[str, str], tuple[LibraryOption, ...]] = field(
        default_factory=dict, repr=False
    )
    _descriptions: Mapping[tuple[str, str], str] = field(default_factory=dict, repr=False)

    @classmethod
    def from_frameworks(cls, frameworks: Iterable[FrameworkOption]) -> "OptionCatalog":
        """Build a catalog from framework entries.

        Every language gets the baseline ``Vanilla`` starter prepended unless
        it already lists one.
        """
        entries = tuple(frameworks)
        languages: dict[str, str] = {}
        by_language: dict[str, list[str]] = {}
        libraries: dict[tuple[str, str], list[LibraryOption]] = {}
        descriptions: dict[tuple[str, str], str] = {}

        for entry in entries:
            lang_key = option_key(entry.language)
            fw_key = option_key(entry.name)
            if not lang_key or not fw_key:
                continue

            languages.setdefault(lang_key, entry.language.strip())
            names = by_language.setdefault(lang_key, [])
            if fw_key not in {option_key(n) for n in names}:
                names.append(entry.name.strip())

            if entry.description and (lang_key, fw_key) not in descriptions:
                descriptions[(lang_key, fw_key)] = entry.description

            libs = libraries.setdefault((lang_key, fw_key), [])
            seen = {option_key(lib.name) for lib in libs}
            for lib in entry.libraries:
                if option_key(lib.name) and option_key(lib.name) not in seen:
                    seen.add(option_key(lib.name))
                    libs.append(lib)

        frozen_frameworks = {}
        for lang_key, names in by_language.items():
            if option_key(BASELINE_FRAMEWORK) not in {option_key(n) for n in names}:
                names = [BASELINE_FRAMEWORK, *names]
            frozen_frameworks[lang_key] = tuple(names)

        return cls(
            entries=entries,
            _languages=MappingProxyType(languages),
            _frameworks=MappingProxyType(frozen_frameworks),
            _libraries=MappingProxyType(
                {key: tuple(libs) for key, libs in libraries.items() if libs}
            ),
            _descriptions=MappingProxyType(descriptions),
        )

    def languages(self) -> list[str]:
        """Language names in catalog order."""
        return list(self._languages.values())

    def canonical_language(self, language: str) -> str | None:
        """Return the catalog spelling of ``language``, if known."""
        return self._languages.get(option_key(language))

    def frameworks_for(self, language: str) -> list[str]:
        """Framework names for a language, never empty."""
        names = self._frameworks.get(option_key(language))
        if not names:
            return [BASELINE_FRAMEWORK]
        return list(names)

    def libraries_for(self, language: str, framework: str) -> list[LibraryOption]:
        """Optional libraries for a (language, framework) pair."""
        return list(self._libraries.get((option_key(language), option_key(framework)), ()))

    def framework_description(self, language: str, framework: str) -> str:
        """Describe a framework for the selection list."""
        described = self._descriptions.get((option_key(language), option_key(framework)))
        if described:
            return described
        known = KNOWN_FRAMEWORK_DESCRIPTIONS.get(option_key(framework))
        if known:
            return known
        return f"{language} template"

    def library_description(self, language: str, framework: str, library: str) -> str:
        wanted = option_key(library)
        for option in self.libraries_for(language, framework):
            if option_key(option.name) == wanted and option.description:
                return option.description
        return DEFAULT_LIBRARY_DESCRIPTION

    def find_framework(self, language: str, framework: str) -> FrameworkOption | None:
        """Find the first catalog entry for a (language, framework) pair.

        The baseline starter is found for every known language even when the
        file does not list it.
        """
        lang_key = option_key(language)
        fw_key = option_key(framework)
        for entry in self.entries:
            if option_key(entry.language) == lang_key and option_key(entry.name) == fw_key:
                return entry
        canonical = self.canonical_language(language)
        if canonical and fw_key == option_key(BASELINE_FRAMEWORK):
            return FrameworkOption(
                language=canonical,
                name=BASELINE_FRAMEWORK,
                description=self.framework_description(canonical, BASELINE_FRAMEWORK),
            )
        return None
