"""
Wizard engine: the single owner of wizard and animation state.

The engine turns each incoming message into state changes plus a list of
timer requests. Whoever drives it (the Textual app or the headless loop)
delivers the requested ticks back after their delay and calls :meth:`view`
to get the next frame.
"""

import logging

from rich.text import Text

from projinit.catalog import OptionCatalog
from projinit.config.schema import Settings
from projinit.wizard.animation import AnimationState, Animator
from projinit.wizard.machine import StageMachine
from projinit.wizard.messages import KeyPress, Message, Resize, RevealTick, Schedule, SmoothTick
from projinit.wizard.render import render_wizard
from projinit.wizard.state import (
    DEFAULT_PANEL_WIDTH,
    WizardResult,
    WizardState,
    clamp,
    result_from_state,
)
from projinit.wizard.styles import DEFAULT_STYLES, WizardStyles

logger = logging.getLogger(__name__)


class WizardEngine:
    """
    Drives one wizard run.

    Args:
        catalog: Selectable options.
        settings: Application settings; defaults are used if omitted.
        default_language: Language highlighted initially.
        default_framework: Framework highlighted when the framework list is built.
        default_name: Initial project name.
        styles: Palette used by :meth:`view`.
    """

    def __init__(
        self,
        catalog: OptionCatalog,
        settings: Settings | None = None,
        default_language: str = "",
        default_framework: str = "",
        default_name: str = "",
        styles: WizardStyles = DEFAULT_STYLES,
    ):
        self.settings = settings or Settings()
        self.styles = styles
        self.machine = StageMachine(
            catalog,
            default_language=default_language,
            default_framework=default_framework,
            default_name=default_name,
        )
        self.animator = Animator(self.settings.animation, AnimationState())
        self._apply_layout()

    @property
    def state(self) -> WizardState:
        return self.machine.state

    @property
    def animation(self) -> AnimationState:
        return self.animator.state

    @property
    def finished(self) -> bool:
        return self.state.finished

    def start(self) -> list[Schedule]:
        """Arm the animation timers for a new run."""
        logger.debug("Wizard engine started")
        return self.animator.start()

    def update(self, msg: Message) -> list[Schedule]:
        """Apply one message and return the timers it asks for."""
        if self.finished:
            return []

        if isinstance(msg, KeyPress):
            change = self.machine.handle_key(msg)
            if change is None or self.finished:
                return []
            return self.animator.trigger_transition(change.forward, self.state.content_width())

        if isinstance(msg, Resize):
            self.resize(msg.width, msg.height)
            return []

        if isinstance(msg, RevealTick):
            return self.animator.reveal_tick(self.state.content_width())

        if isinstance(msg, SmoothTick):
            return self.animator.smooth_tick()

        logger.warning(f"Ignoring unknown message: {msg!r}")
        return []

    def resize(self, width: int, height: int) -> None:
        """Recompute panel and widget sizes for a terminal size."""
        state = self.state
        state.width = width
        state.height = height
        state.panel_width = clamp(int(width * 0.8), 64, width - 4)
        state.panel_height = clamp(int(height * 0.8), 28, height - 4)
        logger.debug(
            f"Resize to {width}x{height}: panel {state.panel_width}x{state.panel_height}"
        )
        self._apply_layout()

    def _apply_layout(self) -> None:
        state = self.state
        panel_width = state.panel_width or DEFAULT_PANEL_WIDTH
        list_width = clamp(panel_width - 8, 56, 100)
        list_height = state.list_height()
        state.languages.set_size(list_width, list_height)
        state.frameworks.set_size(list_width, list_height)
        state.libraries.set_size(list_width, list_height)
        state.name_input.width = clamp(panel_width - 14, 24, 72)

    def view(self) -> Text:
        """Render the current frame."""
        return render_wizard(
            self.state,
            self.animation,
            self.state.width,
            self.state.height,
            self.styles,
            self.settings.animation.reveal_columns,
        )

    def result(self) -> WizardResult | None:
        """The run's outcome; raises the fatal error if one occurred."""
        return result_from_state(self.state)
