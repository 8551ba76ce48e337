"""
Wizard state for projinit.

``WizardState`` is the single mutable aggregate the engine owns for one run.
Nothing else holds a reference to it while the wizard is running.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from projinit.wizard.selection import (
    FrameworkEntry,
    LanguageEntry,
    LibraryEntry,
    SelectionList,
)

# Fallback terminal and panel dimensions before the first resize event.
DEFAULT_WIDTH = 96
DEFAULT_HEIGHT = 36
DEFAULT_PANEL_WIDTH = 88
DEFAULT_PANEL_HEIGHT = 32

# Columns taken by the panel border and horizontal padding.
PANEL_CHROME_WIDTH = 6
# Rows taken by the panel border and vertical padding.
PANEL_CHROME_HEIGHT = 4
# Rows of the panel body that are not the stage content block.
RESERVED_ROWS = 20

NAME_CHAR_LIMIT = 64
NAME_PLACEHOLDER = "my-project"
NAME_REQUIRED = "Name is required"


class Stage(Enum):
    """Wizard stages in flow order."""

    LANGUAGE = auto()
    FRAMEWORK = auto()
    LIBRARIES = auto()
    NAME = auto()
    CONFIRM = auto()
    DONE = auto()


@dataclass
class PendingResult:
    """Selections accumulated as stages complete."""

    language: str = ""
    framework: str = ""
    name: str = ""
    libraries: tuple[str, ...] = ()


@dataclass(frozen=True)
class WizardResult:
    """Final selections handed to the scaffolding step."""

    language: str
    framework: str
    name: str
    libraries: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "language": self.language,
            "framework": self.framework,
            "name": self.name,
            "libraries": list(self.libraries),
        }


@dataclass
class TextInput:
    """Single-line text buffer with a cursor."""

    value: str = ""
    cursor: int = 0
    char_limit: int = NAME_CHAR_LIMIT
    placeholder: str = NAME_PLACEHOLDER
    width: int = 24

    def insert(self, text: str) -> None:
        room = self.char_limit - len(self.value)
        if room <= 0:
            return
        text = text[:room]
        self.value = self.value[: self.cursor] + text + self.value[self.cursor :]
        self.cursor += len(text)

    def backspace(self) -> None:
        if self.cursor == 0:
            return
        self.value = self.value[: self.cursor - 1] + self.value[self.cursor :]
        self.cursor -= 1

    def delete(self) -> None:
        self.value = self.value[: self.cursor] + self.value[self.cursor + 1 :]

    def move(self, delta: int) -> None:
        self.cursor = max(0, min(self.cursor + delta, len(self.value)))

    def home(self) -> None:
        self.cursor = 0

    def end(self) -> None:
        self.cursor = len(self.value)

    def set_value(self, value: str) -> None:
        self.value = value[: self.char_limit]
        self.cursor = len(self.value)


@dataclass
class WizardState:
    """Everything the stage machine reads and writes."""

    stage: Stage = Stage.LANGUAGE
    languages: SelectionList[LanguageEntry] = field(default_factory=SelectionList)
    frameworks: SelectionList[FrameworkEntry] = field(default_factory=SelectionList)
    libraries: SelectionList[LibraryEntry] = field(default_factory=SelectionList)
    selected_libraries: set[str] = field(default_factory=set)
    pending: PendingResult = field(default_factory=PendingResult)
    name_input: TextInput = field(default_factory=TextInput)
    name_error: str = ""
    cancelled: bool = False
    error: Exception | None = None

    width: int = 0
    height: int = 0
    panel_width: int = 0
    panel_height: int = 0

    @property
    def finished(self) -> bool:
        """True once the run reached Done or was cancelled."""
        return self.cancelled or self.stage is Stage.DONE

    def has_library_stage(self) -> bool:
        """Whether the current (language, framework) pair offers libraries."""
        return len(self.libraries) > 0

    def content_width(self) -> int:
        panel_width = self.panel_width or DEFAULT_PANEL_WIDTH
        return max(1, panel_width - PANEL_CHROME_WIDTH)

    def list_height(self) -> int:
        panel_height = self.panel_height or DEFAULT_PANEL_HEIGHT
        return clamp(panel_height - RESERVED_ROWS, 4, 30)


def clamp(value: int, low: int, high: int) -> int:
    """Clamp ``value`` into ``[low, high]``; ``low`` wins if they cross."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def stage_title(stage: Stage) -> str:
    return {
        Stage.LANGUAGE: "Choose a language",
        Stage.FRAMEWORK: "Choose a framework",
        Stage.LIBRARIES: "Choose libraries",
        Stage.NAME: "Name your project",
        Stage.CONFIRM: "Confirm your selections",
    }.get(stage, "")


def stage_subtitle(stage: Stage) -> str:
    return {
        Stage.LANGUAGE: "Pick the main language for the starter",
        Stage.FRAMEWORK: "Select the starter template",
        Stage.LIBRARIES: "Select optional packages (space to toggle)",
        Stage.NAME: "This will create the folder name",
        Stage.CONFIRM: "Review before creating the project",
    }.get(stage, "")


def stage_progress(state: WizardState) -> float:
    """Fraction of the applicable steps already completed."""
    has_libs = state.has_library_stage()
    total_steps = 4 if has_libs else 3
    if state.stage is Stage.LANGUAGE:
        return 0.0
    if state.stage is Stage.FRAMEWORK:
        return 1.0 / total_steps
    if state.stage is Stage.LIBRARIES:
        return 2.0 / total_steps
    if state.stage is Stage.NAME:
        return (3.0 if has_libs else 2.0) / total_steps
    if state.stage is Stage.CONFIRM:
        return 1.0
    return 0.0


def step_label(state: WizardState) -> str:
    if state.stage is Stage.LANGUAGE:
        return "Step 1"
    if state.stage is Stage.FRAMEWORK:
        return "Step 2"
    if state.stage is Stage.LIBRARIES:
        return "Step 3/4"
    if state.stage is Stage.NAME:
        return "Step 4/4" if state.has_library_stage() else "Step 3/3"
    if state.stage is Stage.CONFIRM:
        return "Review"
    return ""


def result_from_state(state: WizardState) -> WizardResult | None:
    """
    Extract the final result of a run.

    Returns:
        The result, or None when the user cancelled.

    Raises:
        Exception: The fatal error that terminated the run, if any.
    """
    if state.error is not None:
        raise state.error
    if state.cancelled or state.stage is not Stage.DONE:
        return None
    pending = state.pending
    return WizardResult(
        language=pending.language,
        framework=pending.framework,
        name=pending.name,
        libraries=tuple(pending.libraries),
    )
