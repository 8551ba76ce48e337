"""
Unit tests for the option catalog.
"""

from pathlib import Path

import pytest
import yaml

from projinit.catalog import (
    DEFAULT_CATALOG_PATH,
    FrameworkOption,
    LibraryOption,
    OptionCatalog,
    load_catalog,
    parse_catalog,
)
from projinit.errors import CatalogError


class TestOptionCatalog:
    """Tests for the frozen catalog value."""

    def test_vanilla_prepended(self, small_catalog):
        assert small_catalog.frameworks_for("Go") == ["Vanilla", "Cobra"]
        assert small_catalog.frameworks_for("node.js") == ["Vanilla", "Express"]

    def test_vanilla_not_duplicated(self):
        catalog = OptionCatalog.from_frameworks(
            [
                FrameworkOption(language="Go", name="vanilla"),
                FrameworkOption(language="Go", name="Cobra"),
            ]
        )
        assert catalog.frameworks_for("Go") == ["vanilla", "Cobra"]

    def test_unknown_language_falls_back_to_vanilla(self, small_catalog):
        assert small_catalog.frameworks_for("Rust") == ["Vanilla"]

    def test_languages_keep_first_spelling(self):
        catalog = OptionCatalog.from_frameworks(
            [
                FrameworkOption(language="Node.js", name="Express"),
                FrameworkOption(language="node.js", name="Hono"),
            ]
        )
        assert catalog.languages() == ["Node.js"]
        assert catalog.frameworks_for("NODE.JS") == ["Vanilla", "Express", "Hono"]
        assert catalog.canonical_language("node.JS") == "Node.js"
        assert catalog.canonical_language("Deno") is None

    def test_libraries_merge_across_duplicates(self, sample_catalog_yaml):
        catalog = parse_catalog(yaml.safe_load(sample_catalog_yaml))
        names = [lib.name for lib in catalog.libraries_for("rust", "AXUM")]
        assert names == ["serde", "tokio", "tracing"]

    def test_framework_description_sources(self, sample_catalog_yaml):
        catalog = parse_catalog(yaml.safe_load(sample_catalog_yaml))
        assert catalog.framework_description("Rust", "axum") == "async web framework"
        assert catalog.framework_description("Rust", "Vanilla") == "minimal starter"
        assert catalog.framework_description("Rust", "Clap") == "Rust template"

    def test_library_description(self, small_catalog):
        assert small_catalog.library_description("Go", "Cobra", "VIPER") == "configuration loading"
        assert small_catalog.library_description("Go", "Cobra", "zap") == "optional package"

    def test_find_framework(self):
        catalog = OptionCatalog.from_frameworks(
            [FrameworkOption(language="PHP", name="Laravel", generator="composer-laravel")]
        )
        entry = catalog.find_framework("php", "laravel")
        assert entry is not None
        assert entry.generator == "composer-laravel"
        assert catalog.find_framework("php", "Symfony") is None

    def test_find_baseline_framework(self):
        catalog = OptionCatalog.from_frameworks([FrameworkOption(language="PHP", name="Laravel")])
        entry = catalog.find_framework(" php ", "VANILLA")
        assert (entry.language, entry.name) == ("PHP", "Vanilla")
        assert entry.description == "minimal starter"
        assert catalog.find_framework("Rust", "Vanilla") is None

    def test_catalog_is_immutable(self, small_catalog):
        with pytest.raises(Exception):
            small_catalog.entries = ()  # type: ignore[misc]
        with pytest.raises(TypeError):
            small_catalog._frameworks["go"] = ("Gin",)  # type: ignore[index]

    def test_accessors_return_copies(self, small_catalog):
        small_catalog.frameworks_for("Go").append("Gin")
        small_catalog.libraries_for("Go", "Cobra").clear()
        assert small_catalog.frameworks_for("Go") == ["Vanilla", "Cobra"]
        assert len(small_catalog.libraries_for("Go", "Cobra")) == 2

    def test_library_options_frozen(self):
        lib = LibraryOption(name="zap")
        with pytest.raises(Exception):
            lib.name = "zerolog"  # type: ignore[misc]


class TestCatalogLoader:
    """Tests for reading catalog files."""

    def test_bundled_catalog(self):
        catalog = load_catalog()
        assert DEFAULT_CATALOG_PATH.exists()
        assert catalog.languages() == ["Go", "Node.js", "Bun", "Python", "PHP"]
        assert catalog.frameworks_for("Go") == ["Vanilla", "Cobra"]
        assert catalog.frameworks_for("PHP") == ["Vanilla", "Laravel"]
        assert [lib.name for lib in catalog.libraries_for("Go", "Cobra")] == [
            "viper",
            "zap",
            "testify",
            "air",
        ]

    def test_load_from_file(self, temp_dir: Path, sample_catalog_yaml):
        path = temp_dir / "catalog.yaml"
        path.write_text(sample_catalog_yaml)
        catalog = load_catalog(path)
        assert catalog.languages() == ["Rust"]

    def test_missing_file(self, temp_dir: Path):
        with pytest.raises(CatalogError, match="not found"):
            load_catalog(temp_dir / "nope.yaml")

    def test_invalid_yaml(self, temp_dir: Path):
        path = temp_dir / "catalog.yaml"
        path.write_text("frameworks: [unclosed")
        with pytest.raises(CatalogError, match="Invalid YAML"):
            load_catalog(path)

    def test_wrong_shape(self):
        with pytest.raises(CatalogError):
            parse_catalog({"frameworks": [{"language": "Go"}]})
        with pytest.raises(CatalogError, match="must be a mapping"):
            parse_catalog(["Go"])  # type: ignore[arg-type]

    def test_empty_document(self):
        catalog = parse_catalog(None)
        assert catalog.languages() == []
        assert catalog.frameworks_for("Go") == ["Vanilla"]
