"""
Stage state machine for the projinit wizard.

Language -> Framework -> [Libraries] -> Name -> Confirm -> Done, with back
navigation and cancel from anywhere. The Libraries stage only exists when the
chosen (language, framework) pair offers libraries.
"""

import logging
from dataclasses import dataclass

from projinit.catalog import BASELINE_FRAMEWORK, OptionCatalog
from projinit.errors import WizardConfigurationError
from projinit.wizard.messages import KeyPress
from projinit.wizard.selection import (
    SelectionList,
    build_framework_list,
    build_language_list,
    build_library_items,
    selected_libraries,
)
from projinit.wizard.state import NAME_REQUIRED, PendingResult, Stage, WizardState

logger = logging.getLogger(__name__)


@dataclass
class Binding:
    """Keys bound to one action, with the hint shown in the status line."""

    keys: tuple[str, ...]
    help_key: str
    help_desc: str
    enabled: bool = True

    def matches(self, key: str) -> bool:
        return self.enabled and key in self.keys


class KeyMap:
    """Key bindings of the wizard."""

    def __init__(self) -> None:
        self.cancel = Binding(("ctrl+c", "escape"), "esc", "cancel")
        self.back = Binding(("b", "left", "backspace"), "b", "back", enabled=False)
        self.confirm = Binding(("enter",), "enter", "next")
        self.toggle = Binding(("space",), "space", "toggle", enabled=False)

        self.up = Binding(("up", "k"), "↑/k", "up")
        self.down = Binding(("down", "j"), "↓/j", "down")
        self.first = Binding(("home", "g"), "g/home", "go to start")
        self.last = Binding(("end", "G"), "G/end", "go to end")
        self.page_up = Binding(("pageup",), "pgup", "prev page")
        self.page_down = Binding(("pagedown",), "pgdn", "next page")

    def update_for(self, stage: Stage) -> None:
        """Enable the stage-specific bindings."""
        self.back.enabled = stage not in (Stage.LANGUAGE, Stage.NAME)
        self.toggle.enabled = stage is Stage.LIBRARIES

    def short_help(self) -> list[Binding]:
        """Bindings listed in the status line, enabled ones only."""
        return [b for b in (self.confirm, self.toggle, self.back, self.cancel) if b.enabled]


@dataclass(frozen=True)
class StageChange:
    """A stage transition that should trigger the slide animation."""

    previous: Stage
    current: Stage
    forward: bool


class StageMachine:
    """Applies user actions to a :class:`WizardState`.

    Args:
        catalog: Selectable options for this run.
        state: The state to drive. A fresh one is created if omitted.
        default_language: Language highlighted on the first stage.
        default_framework: Framework highlighted when the framework list is built.
        default_name: Initial content of the name buffer.
    """

    def __init__(
        self,
        catalog: OptionCatalog,
        state: WizardState | None = None,
        default_language: str = "",
        default_framework: str = "",
        default_name: str = "",
    ):
        self.catalog = catalog
        self.keys = KeyMap()
        self.state = state or WizardState()
        self.state.languages = build_language_list(catalog, default_language)
        self.state.pending = PendingResult(
            language=default_language,
            framework=default_framework or BASELINE_FRAMEWORK,
        )
        if default_name:
            self.state.name_input.set_value(default_name)
        self.keys.update_for(self.state.stage)

    # ------------------------------------------------------------------
    # Key routing
    # ------------------------------------------------------------------

    def handle_key(self, event: KeyPress) -> StageChange | None:
        """Route a key press to the matching action."""
        state = self.state
        if state.finished:
            return None

        key = event.key
        if self.keys.cancel.matches(key):
            self.cancel()
            return None
        if self.keys.back.matches(key):
            return self.back()

        if state.stage is Stage.NAME:
            return self._handle_name_key(event)

        if self.keys.confirm.matches(key):
            return self.confirm()
        if self.keys.toggle.matches(key):
            self.toggle()
            return None

        active = self._active_list()
        if active is not None:
            self._move(active, key)
        return None

    def _handle_name_key(self, event: KeyPress) -> StageChange | None:
        buffer = self.state.name_input
        key = event.key
        if self.keys.confirm.matches(key):
            return self.confirm()
        if key == "backspace":
            buffer.backspace()
        elif key == "delete":
            buffer.delete()
        elif key == "left":
            buffer.move(-1)
        elif key == "right":
            buffer.move(1)
        elif key in ("home", "ctrl+a"):
            buffer.home()
        elif key in ("end", "ctrl+e"):
            buffer.end()
        elif event.is_printable:
            buffer.insert(event.character or "")
        return None

    def _active_list(self) -> SelectionList | None:
        stage = self.state.stage
        if stage is Stage.LANGUAGE:
            return self.state.languages
        if stage is Stage.FRAMEWORK:
            return self.state.frameworks
        if stage is Stage.LIBRARIES:
            return self.state.libraries
        return None

    def _move(self, active: SelectionList, key: str) -> None:
        keys = self.keys
        if keys.up.matches(key):
            active.move_previous()
        elif keys.down.matches(key):
            active.move_next()
        elif keys.first.matches(key):
            active.move_first()
        elif keys.last.matches(key):
            active.move_last()
        elif keys.page_up.matches(key):
            active.page_up()
        elif keys.page_down.matches(key):
            active.page_down()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def confirm(self) -> StageChange | None:
        """Advance from the current stage if its condition holds."""
        state = self.state
        if state.finished:
            return None

        previous = state.stage
        if previous is Stage.LANGUAGE:
            language = state.languages.selected()
            if language is None:
                self._fail("no language selected", previous)
                return None
            state.pending.language = language.name
            frameworks = build_framework_list(
                self.catalog, language.name, state.pending.framework
            )
            frameworks.set_size(state.languages.width, state.list_height())
            state.frameworks = frameworks
            state.stage = Stage.FRAMEWORK

        elif previous is Stage.FRAMEWORK:
            framework = state.frameworks.selected()
            if framework is None:
                self._fail("no framework selected", previous)
                return None
            state.pending.framework = framework.name
            state.selected_libraries = set()
            libraries = SelectionList(
                build_library_items(
                    self.catalog, state.pending.language, framework.name, state.selected_libraries
                ),
                width=state.frameworks.width,
                height=state.list_height(),
            )
            state.libraries = libraries
            state.stage = Stage.LIBRARIES if len(libraries) else Stage.NAME

        elif previous is Stage.LIBRARIES:
            state.stage = Stage.NAME

        elif previous is Stage.NAME:
            value = state.name_input.value.strip()
            if not value:
                state.name_error = NAME_REQUIRED
                return None
            state.name_error = ""
            state.pending.name = value
            state.pending.libraries = selected_libraries(state.selected_libraries)
            state.stage = Stage.CONFIRM

        elif previous is Stage.CONFIRM:
            state.stage = Stage.DONE
            self.keys.update_for(state.stage)
            logger.debug(f"Wizard finished: {state.pending}")
            return None

        else:
            return None

        return self._changed(previous, forward=True)

    def back(self) -> StageChange | None:
        """Return to the previous stage.

        Pending selections are kept; re-confirming a stage overwrites them.
        """
        state = self.state
        if state.finished:
            return None

        previous = state.stage
        if previous is Stage.FRAMEWORK:
            state.stage = Stage.LANGUAGE
        elif previous is Stage.LIBRARIES:
            state.stage = Stage.FRAMEWORK
        elif previous is Stage.NAME:
            state.stage = Stage.LIBRARIES if state.has_library_stage() else Stage.FRAMEWORK
        elif previous is Stage.CONFIRM:
            state.stage = Stage.NAME
        else:
            return None

        return self._changed(previous, forward=False)

    def toggle(self) -> None:
        """Flip the highlighted library in or out of the selection."""
        state = self.state
        if state.finished or state.stage is not Stage.LIBRARIES:
            return

        entry = state.libraries.selected()
        if entry is None:
            return
        if entry.name in state.selected_libraries:
            state.selected_libraries.discard(entry.name)
        else:
            state.selected_libraries.add(entry.name)
        state.libraries.set_items(
            build_library_items(
                self.catalog,
                state.pending.language,
                state.pending.framework,
                state.selected_libraries,
            )
        )

    def cancel(self) -> None:
        if self.state.finished:
            return
        self.state.cancelled = True
        logger.debug(f"Wizard cancelled on stage {self.state.stage.name}")

    def _fail(self, message: str, stage: Stage) -> None:
        error = WizardConfigurationError(message, stage=stage.name.lower())
        logger.error(f"Wizard configuration error on stage {stage.name}: {message}")
        self.state.error = error
        self.state.cancelled = True

    def _changed(self, previous: Stage, forward: bool) -> StageChange:
        current = self.state.stage
        self.keys.update_for(current)
        logger.debug(f"Stage {previous.name} -> {current.name}")
        return StageChange(previous=previous, current=current, forward=forward)
