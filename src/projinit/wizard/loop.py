"""
Headless event loop for the wizard engine.

Runs the engine on a virtual clock: posted messages are processed strictly in
arrival order, and timers requested by the engine fire when the clock is
advanced past their due time. Used for scripted runs and tests.
"""

import heapq
import itertools
import logging
from collections import deque

from rich.text import Text

from projinit.wizard.engine import WizardEngine
from projinit.wizard.messages import Message, Schedule

logger = logging.getLogger(__name__)


class EventLoop:
    """Single-threaded message loop around a :class:`WizardEngine`."""

    def __init__(self, engine: WizardEngine):
        self.engine = engine
        self.clock = 0.0
        self.processed = 0
        self.frame: Text | None = None
        self._queue: deque[Message] = deque()
        self._timers: list[tuple[float, int, Message]] = []
        self._sequence = itertools.count()

    @property
    def finished(self) -> bool:
        return self.engine.finished

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    @property
    def queued(self) -> int:
        return len(self._queue)

    def start(self) -> None:
        self._arm(self.engine.start())
        self.frame = self.engine.view()

    def post(self, msg: Message) -> None:
        """Queue a message from outside (key press, resize)."""
        self._queue.append(msg)

    def drain(self) -> int:
        """Process every queued message. Returns how many were processed."""
        count = 0
        while self._queue:
            if self.finished:
                self._abandon()
                break
            msg = self._queue.popleft()
            self._arm(self.engine.update(msg))
            self.frame = self.engine.view()
            self.processed += 1
            count += 1
        if self.finished:
            self._abandon()
        return count

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, firing timers that come due.

        Queued messages are drained first, and again after each timer, so
        a timer never overtakes a message that arrived before it fired.

        Returns:
            Number of timer messages fired.
        """
        deadline = self.clock + seconds
        fired = 0
        self.drain()
        while self._timers and self._timers[0][0] <= deadline and not self.finished:
            due, _, msg = heapq.heappop(self._timers)
            self.clock = max(self.clock, due)
            self._queue.append(msg)
            self.drain()
            fired += 1
        if not self.finished:
            self.clock = deadline
        return fired

    def run_until_idle(self, max_time: float = 120.0) -> float:
        """
        Fire timers until none remain or ``max_time`` virtual seconds pass.

        Returns:
            Virtual time spent.
        """
        started = self.clock
        self.drain()
        while self._timers and not self.finished:
            due = self._timers[0][0]
            if due - started > max_time:
                logger.warning(f"Timers still pending after {max_time}s of virtual time")
                break
            self.advance(due - self.clock)
        return self.clock - started

    def _arm(self, schedules: list[Schedule]) -> None:
        for schedule in schedules:
            heapq.heappush(
                self._timers,
                (self.clock + schedule.delay, next(self._sequence), schedule.message),
            )

    def _abandon(self) -> None:
        if self._queue or self._timers:
            logger.debug(
                f"Engine finished; dropping {len(self._queue)} queued messages "
                f"and {len(self._timers)} timers"
            )
        self._queue.clear()
        self._timers.clear()
