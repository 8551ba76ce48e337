"""
The projinit setup wizard.

A message-driven core (stage machine, springs, animation timers and a pure
frame renderer) hosted either by the Textual app or by the headless
:class:`EventLoop`.
"""

from projinit.wizard.animation import AnimationState, Animator
from projinit.wizard.engine import WizardEngine
from projinit.wizard.loop import EventLoop
from projinit.wizard.machine import KeyMap, StageChange, StageMachine
from projinit.wizard.messages import KeyPress, Message, Resize, RevealTick, Schedule, SmoothTick
from projinit.wizard.render import render_wizard
from projinit.wizard.selection import (
    FrameworkEntry,
    LanguageEntry,
    LibraryEntry,
    SelectionList,
)
from projinit.wizard.spring import Spring, SpringState, fps
from projinit.wizard.state import Stage, WizardResult, WizardState, result_from_state

__all__ = [
    "AnimationState",
    "Animator",
    "EventLoop",
    "FrameworkEntry",
    "KeyMap",
    "KeyPress",
    "LanguageEntry",
    "LibraryEntry",
    "Message",
    "Resize",
    "RevealTick",
    "Schedule",
    "SelectionList",
    "SmoothTick",
    "Spring",
    "SpringState",
    "Stage",
    "StageChange",
    "StageMachine",
    "WizardEngine",
    "WizardResult",
    "WizardState",
    "fps",
    "render_wizard",
    "result_from_state",
]
