"""
Title reveal, border spark and spring animations.

Two timer chains drive everything here. The reveal chain ticks slowly and
advances ``title_frame``; the smooth chain ticks at the frame rate and steps
the panel entrance and stage transition springs. Each chain schedules its own
successor only while it still has work to do.
"""

import logging
from dataclasses import dataclass, field

from projinit.config.schema import AnimationConfig
from projinit.wizard.messages import RevealTick, Schedule, SmoothTick
from projinit.wizard.spring import Spring, SpringState, fps, is_settled

logger = logging.getLogger(__name__)

ENTRANCE_EPSILON = 0.001
TRANSITION_EPSILON = 0.5

# "SCAFFOLD" and "WIZARD" in block letters, separated by a blank line.
# Lines of one word share the same width.
TITLE_ART = (
    "▄███▄ ▄███▄  ▄█▄  █▀▀▀▀ █▀▀▀▀ ▄███▄ █     ▄██▄",
    "▀▄    █     █▀ ▀█ █▀▀   █▀▀   █   █ █     █  █",
    " ▀██▄ █     █▀▀▀█ █     █     █   █ █     █  █",
    "▀███▀ ▀███▀ ▀   ▀ ▀     ▀     ▀███▀ ▀▀▀▀▀ ▀██▀",
    "",
    "        █   █ ▀█▀ ▀▀▀█  ▄█▄  █▀▀▄ ▄██▄        ",
    "        █ █ █  █    █▀ █▀ ▀█ █▀▀▄ █  █        ",
    "        █▄█▄█  █   █▀  █▀▀▀█ █  █ █  █        ",
    "        ▀   ▀ ▀▀▀ █▀▀▀ ▀   ▀ ▀  ▀ ▀██▀        ",
)


def art_width() -> int:
    """Width of the widest title art line."""
    return max(len(line) for line in TITLE_ART)


def reveal_total_ticks(reveal_columns: int = 3) -> int:
    """Ticks needed to reveal the whole title art."""
    width = art_width()
    return (width + reveal_columns - 1) // reveal_columns


def revealed_columns(frame: int, reveal_columns: int = 3) -> int:
    """Columns of the art visible at ``frame``."""
    return min(frame * reveal_columns, art_width())


def spark_cycle(content_width: int) -> int:
    """Frames for the spark to travel once along a border."""
    return content_width + 2


def spark_position(frame: int, content_width: int) -> int:
    return frame % spark_cycle(content_width)


def total_tick_budget(content_width: int, reveal_columns: int = 3) -> int:
    """Reveal ticks plus two full spark passes."""
    return reveal_total_ticks(reveal_columns) + spark_cycle(content_width) * 2


@dataclass
class AnimationState:
    """Animation values for one wizard run."""

    title_frame: int = 0
    reveal_done: bool = False
    entrance: SpringState = field(default_factory=lambda: SpringState(0.0, 0.0, 1.0))
    transition: SpringState = field(default_factory=SpringState)
    panel_ready: bool = False
    transition_active: bool = False
    smooth_armed: bool = False
    smooth_ticks: int = 0
    ceiling_warned: bool = False

    @property
    def transition_offset(self) -> int:
        """Current slide offset in whole columns."""
        if not self.transition_active:
            return 0
        return int(round(self.transition.position))


class Animator:
    """Advances an :class:`AnimationState` in response to timer messages."""

    def __init__(self, config: AnimationConfig | None = None, state: AnimationState | None = None):
        self.config = config or AnimationConfig()
        self.state = state or AnimationState()
        delta = fps(self.config.smooth_fps)
        self.entrance_spring = Spring(
            delta, self.config.entrance_frequency, self.config.entrance_damping
        )
        self.transition_spring = Spring(
            delta, self.config.transition_frequency, self.config.transition_damping
        )

    @property
    def reveal_interval(self) -> float:
        return self.config.reveal_interval_ms / 1000.0

    @property
    def smooth_interval(self) -> float:
        return fps(self.config.smooth_fps)

    def start(self) -> list[Schedule]:
        """Arm both timer chains, or finish everything at once if disabled."""
        state = self.state
        if not self.config.enabled:
            state.entrance.snap()
            state.panel_ready = True
            state.title_frame = reveal_total_ticks(self.config.reveal_columns)
            state.reveal_done = True
            return []

        state.smooth_armed = True
        return [
            Schedule(self.reveal_interval, RevealTick()),
            Schedule(self.smooth_interval, SmoothTick()),
        ]

    def reveal_tick(self, content_width: int) -> list[Schedule]:
        """Advance the title one frame and decide whether to keep ticking."""
        state = self.state
        state.title_frame += 1
        if state.reveal_done:
            return []
        if state.title_frame >= total_tick_budget(content_width, self.config.reveal_columns):
            state.reveal_done = True
            logger.debug(f"Reveal chain stopped at frame {state.title_frame}")
            return []
        return [Schedule(self.reveal_interval, RevealTick())]

    def smooth_tick(self) -> list[Schedule]:
        """Step both springs once; reschedule while either is moving."""
        state = self.state
        state.smooth_armed = False
        needs_more = False

        if not state.panel_ready:
            self.entrance_spring.step(state.entrance)
            if is_settled(state.entrance, ENTRANCE_EPSILON):
                state.entrance.snap()
                state.panel_ready = True
            else:
                needs_more = True

        if state.transition_active:
            self.transition_spring.step(state.transition)
            if is_settled(state.transition, TRANSITION_EPSILON):
                state.transition.snap()
                state.transition_active = False
            else:
                needs_more = True

        if not needs_more:
            state.smooth_ticks = 0
            state.ceiling_warned = False
            return []

        state.smooth_ticks += 1
        if state.smooth_ticks > self.config.settle_tick_ceiling and not state.ceiling_warned:
            state.ceiling_warned = True
            logger.warning(
                f"Springs still moving after {state.smooth_ticks} ticks "
                f"(entrance={state.entrance}, transition={state.transition})"
            )
        state.smooth_armed = True
        return [Schedule(self.smooth_interval, SmoothTick())]

    def trigger_transition(self, forward: bool, content_width: int) -> list[Schedule]:
        """Start a slide from the right (forward) or left (back).

        Overrides any slide already in flight.
        """
        if not self.config.enabled:
            return []
        state = self.state
        offset = float(content_width if forward else -content_width)
        state.transition.reset(offset, 0.0)
        state.transition_active = True
        if state.smooth_armed:
            return []
        state.smooth_armed = True
        logger.debug("Smooth chain re-armed for stage transition")
        return [Schedule(self.smooth_interval, SmoothTick())]
