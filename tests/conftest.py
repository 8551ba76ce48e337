"""
Pytest configuration and fixtures for projinit tests.
"""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from projinit.catalog import FrameworkOption, LibraryOption, OptionCatalog, load_catalog
from projinit.config import AnimationConfig, Settings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_projinit_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point PROJINIT_HOME at an empty temporary directory."""
    home = temp_dir / ".projinit"
    home.mkdir()
    monkeypatch.setenv("PROJINIT_HOME", str(home))
    for key in list(os.environ):
        if key.startswith("PROJINIT_") and key != "PROJINIT_HOME":
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def default_catalog() -> OptionCatalog:
    """The catalog bundled with the package."""
    return load_catalog()


@pytest.fixture
def small_catalog() -> OptionCatalog:
    """Two languages; only Go/Cobra offers libraries."""
    return OptionCatalog.from_frameworks(
        [
            FrameworkOption(
                language="Go",
                name="Cobra",
                libraries=(
                    LibraryOption(name="viper", description="configuration loading"),
                    LibraryOption(name="zap"),
                ),
            ),
            FrameworkOption(language="Node.js", name="Express"),
        ]
    )


@pytest.fixture
def quiet_settings() -> Settings:
    """Settings with animations turned off."""
    return Settings(animation=AnimationConfig(enabled=False))


@pytest.fixture
def sample_config() -> dict:
    """Provide a sample settings dictionary."""
    return {
        "defaults": {
            "language": "Python",
            "framework": "FastAPI",
            "dir": "~/code",
        },
        "animation": {
            "reveal_interval_ms": 100,
            "smooth_fps": 30,
        },
    }


@pytest.fixture
def sample_catalog_yaml() -> str:
    """Provide sample catalog YAML content."""
    return """
frameworks:
  - language: Rust
    name: Axum
    description: async web framework
    libraries:
      - name: serde
        description: serialization
      - name: tokio
  - language: rust
    name: axum
    libraries:
      - name: tracing
  - language: Rust
    name: Clap
"""
