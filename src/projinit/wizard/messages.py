"""
Messages processed by the wizard engine.

Terminal input and self-rescheduling timers both produce these; the engine
handles them one at a time in arrival order.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyPress:
    """A key event. ``key`` uses Textual key names ("enter", "ctrl+c", "a")."""

    key: str
    character: str | None = None

    @property
    def is_printable(self) -> bool:
        return bool(self.character) and self.character.isprintable()


@dataclass(frozen=True)
class Resize:
    """The terminal changed size."""

    width: int
    height: int


@dataclass(frozen=True)
class RevealTick:
    """Advances the title reveal and border spark by one frame."""


@dataclass(frozen=True)
class SmoothTick:
    """Steps the spring animations by one fixed timestep."""


Message = KeyPress | Resize | RevealTick | SmoothTick


@dataclass(frozen=True)
class Schedule:
    """Request to deliver ``message`` after ``delay`` seconds."""

    delay: float
    message: Message
