"""
Integration tests for complete wizard runs.

Drives the engine end to end, headless through the event loop and through
the Textual app with a pilot.
"""

import logging

import pytest

from projinit.catalog import OptionCatalog, load_catalog
from projinit.config import AnimationConfig, Settings
from projinit.errors import WizardConfigurationError
from projinit.tui.app import WizardApp
from projinit.wizard import EventLoop, KeyPress, Resize, Stage, WizardEngine, WizardResult


@pytest.fixture
def catalog():
    """Bundled catalog."""
    return load_catalog()


def keys(loop: EventLoop, *names: str) -> None:
    for name in names:
        character = name if len(name) == 1 else None
        loop.post(KeyPress(name, character))


def text(loop: EventLoop, value: str) -> None:
    for ch in value:
        loop.post(KeyPress(ch, ch))


# =============================================================================
# Headless runs
# =============================================================================


class TestHeadlessRuns:
    """Scripted runs through the event loop with animations enabled."""

    def test_cobra_with_libraries(self, catalog):
        loop = EventLoop(WizardEngine(catalog, default_language="Go", default_framework="Cobra"))
        loop.start()
        loop.post(Resize(120, 40))
        loop.advance(0.5)

        keys(loop, "enter", "enter")
        loop.advance(0.2)
        assert loop.engine.state.stage is Stage.LIBRARIES

        keys(loop, "space", "G", "space", "enter")
        text(loop, "my-cli")
        keys(loop, "enter")
        loop.advance(0.3)
        assert loop.engine.state.stage is Stage.CONFIRM
        assert "Libraries   air, zap" in loop.frame.plain

        keys(loop, "enter")
        loop.drain()
        assert loop.finished
        assert loop.pending_timers == 0
        assert loop.engine.result() == WizardResult(
            language="Go", framework="Cobra", name="my-cli", libraries=("air", "zap")
        )

    def test_framework_without_libraries_skips_stage(self, catalog):
        loop = EventLoop(WizardEngine(catalog, default_language="Node.js"))
        loop.start()
        keys(loop, "enter", "end", "enter")
        loop.drain()
        state = loop.engine.state
        assert state.pending.framework == "Vanilla"
        assert state.stage is Stage.NAME
        assert "Step 3/3" in loop.frame.plain

    def test_back_and_forth_changes_answers(self, catalog):
        loop = EventLoop(WizardEngine(catalog, default_language="Go", default_framework="Cobra"))
        loop.start()
        keys(loop, "enter", "enter", "space", "b", "b")
        loop.drain()
        assert loop.engine.state.stage is Stage.LANGUAGE

        keys(loop, "g", "enter", "enter")
        text(loop, "bunny")
        keys(loop, "enter", "enter")
        loop.run_until_idle()
        result = loop.engine.result()
        assert result.language == "Bun"
        assert result.framework == "Bun"
        assert result.libraries == ()

    def test_cancel_mid_animation(self, catalog):
        loop = EventLoop(WizardEngine(catalog))
        loop.start()
        loop.advance(0.05)
        keys(loop, "enter")
        loop.advance(0.05)
        keys(loop, "escape")
        loop.drain()
        assert loop.finished
        assert loop.pending_timers == 0
        assert loop.engine.result() is None
        assert loop.frame.plain.strip() == "cancelled"

    def test_animations_settle_after_transitions(self, catalog):
        loop = EventLoop(WizardEngine(catalog))
        loop.start()
        keys(loop, "enter", "b", "enter")
        loop.run_until_idle()
        anim = loop.engine.animation
        assert anim.panel_ready
        assert not anim.transition_active
        assert anim.transition_offset == 0
        assert not anim.smooth_armed

    def test_empty_catalog_is_fatal(self):
        loop = EventLoop(WizardEngine(OptionCatalog.from_frameworks([])))
        loop.start()
        keys(loop, "enter")
        loop.drain()
        assert loop.finished
        assert loop.frame.plain.startswith("error: no language selected")
        with pytest.raises(WizardConfigurationError):
            loop.engine.result()


# =============================================================================
# Textual app
# =============================================================================


@pytest.fixture
def quiet() -> Settings:
    return Settings(animation=AnimationConfig(enabled=False))


class TestWizardApp:
    @pytest.mark.asyncio
    async def test_complete_run(self, catalog, quiet):
        app = WizardApp(catalog, quiet, default_language="Python", default_framework="FastAPI")
        async with app.run_test(size=(96, 36)) as pilot:
            await pilot.press("enter", "enter", "space", "enter")
            await pilot.press(*"api")
            await pilot.press("enter")
            assert app.engine.state.stage is Stage.CONFIRM
            await pilot.press("enter")
        assert app.return_value == WizardResult(
            language="Python", framework="FastAPI", name="api", libraries=("httpx",)
        )

    @pytest.mark.asyncio
    async def test_escape_cancels(self, catalog, quiet):
        app = WizardApp(catalog, quiet)
        async with app.run_test(size=(96, 36)) as pilot:
            await pilot.press("enter")
            await pilot.press("escape")
        assert app.return_value is None
        assert app.error is None
        assert app.engine.state.cancelled

    @pytest.mark.asyncio
    async def test_fatal_error_recorded(self, quiet, caplog):
        app = WizardApp(OptionCatalog.from_frameworks([]), quiet)
        with caplog.at_level(logging.DEBUG, logger="projinit"):
            async with app.run_test(size=(96, 36)) as pilot:
                await pilot.press("enter")
        assert isinstance(app.error, WizardConfigurationError)
        assert app.return_value is None
        errors = [
            r for r in caplog.records if r.name.startswith("projinit") and r.levelno >= logging.ERROR
        ]
        assert len(errors) == 1
        assert errors[0].name == "projinit.wizard.machine"
