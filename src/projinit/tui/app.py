"""
Textual host for the projinit wizard.

The app owns nothing but the engine: key and resize events become engine
messages, timer requests become ``set_timer`` callbacks, and every processed
message repaints a single ``Static`` with the engine's frame.
"""

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from projinit.catalog import OptionCatalog
from projinit.config.schema import Settings
from projinit.wizard.engine import WizardEngine
from projinit.wizard.messages import KeyPress, Message, Resize, Schedule
from projinit.wizard.state import WizardResult

logger = logging.getLogger(__name__)


class WizardApp(App[WizardResult | None]):
    """Full-screen project setup wizard."""

    CSS = """
    Screen {
        background: #1f2335;
        overflow: hidden;
    }

    #wizard {
        width: 100%;
        height: 100%;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "cancel_wizard", "Cancel", show=False, priority=True),
        Binding("escape", "cancel_wizard", "Cancel", show=False, priority=True),
    ]

    def __init__(
        self,
        catalog: OptionCatalog,
        settings: Settings | None = None,
        default_language: str = "",
        default_framework: str = "",
        default_name: str = "",
    ):
        """Initialize the wizard app.

        Args:
            catalog: Selectable options
            settings: Application settings
            default_language: Language highlighted initially
            default_framework: Framework highlighted initially
            default_name: Initial project name
        """
        super().__init__()
        self.engine = WizardEngine(
            catalog,
            settings=settings,
            default_language=default_language,
            default_framework=default_framework,
            default_name=default_name,
        )
        self.error: Exception | None = None

    def compose(self) -> ComposeResult:
        yield Static(id="wizard")

    def on_mount(self) -> None:
        size = self.size
        if size.width and size.height:
            self.engine.resize(size.width, size.height)
        self._arm(self.engine.start())
        self._repaint()

    def on_resize(self, event: events.Resize) -> None:
        self._dispatch(Resize(event.size.width, event.size.height))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self._dispatch(KeyPress(event.key, event.character))

    def action_cancel_wizard(self) -> None:
        self._dispatch(KeyPress("escape"))

    def _dispatch(self, msg: Message) -> None:
        if self.engine.finished:
            return
        self._arm(self.engine.update(msg))
        if self.engine.finished:
            self._finish()
        else:
            self._repaint()

    def _arm(self, schedules: list[Schedule]) -> None:
        for schedule in schedules:
            message = schedule.message
            self.set_timer(schedule.delay, lambda message=message: self._dispatch(message))

    def _repaint(self) -> None:
        frame = self.engine.view()
        frame.no_wrap = True
        frame.overflow = "crop"
        self.query_one("#wizard", Static).update(frame)

    def _finish(self) -> None:
        try:
            result = self.engine.result()
        except Exception as e:
            logger.debug(f"Wizard stopped: {e}")
            self.error = e
            result = None
        self.exit(result)


def run_wizard(
    catalog: OptionCatalog,
    settings: Settings | None = None,
    default_language: str = "",
    default_framework: str = "",
    default_name: str = "",
) -> WizardResult | None:
    """Run the wizard in the terminal.

    Returns:
        The selections, or None if the user cancelled.

    Raises:
        WizardConfigurationError: If the wizard hit a fatal configuration error.
    """
    app = WizardApp(
        catalog,
        settings=settings,
        default_language=default_language,
        default_framework=default_framework,
        default_name=default_name,
    )
    result = app.run()
    if app.error is not None:
        raise app.error
    return result
