"""Software timers that flag scheduler tasks after a number of ticks."""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass

from softsched.scheduler import BadTaskIdError, Scheduler

DEFAULT_MAX_TIMERS = 32

_UINT32 = 1 << 32
_UINT16 = 1 << 16


class TimerError(Exception):
    """Base class for timer errors."""


class TimersFullError(TimerError):
    """Raised when every timer slot is in use."""


class BadTimerIdError(TimerError):
    """Raised when a timer id does not name an existing timer."""


@dataclass
class _Timer:
    task_id: int
    period: int
    cycles: int
    countdown: int
    active: bool = False


class TimerBank:
    """A fixed number of timers driven by calls to :meth:`tick`.

    A timer counts down ``period`` ticks and then flags its task in the
    scheduler. ``cycles`` limits how many times it fires before it deletes
    itself; zero means it repeats forever.
    """

    def __init__(self, scheduler: Scheduler, max_timers: int = DEFAULT_MAX_TIMERS) -> None:
        if max_timers < 1:
            raise ValueError("max_timers must be at least 1")
        self.scheduler = scheduler
        self.max_timers = max_timers
        self._timers: dict[int, _Timer] = {}

    def __len__(self) -> int:
        return len(self._timers)

    def _get(self, timer_id: int) -> _Timer:
        try:
            return self._timers[timer_id]
        except KeyError:
            raise BadTimerIdError(f"no timer with id {timer_id}") from None

    def create(self, task_id: int, period: int, cycles: int = 0) -> int:
        """Create a stopped timer in the lowest free slot and return its id."""
        period %= _UINT32
        cycles %= _UINT16
        timer_id = next(
            (i for i in range(self.max_timers) if i not in self._timers), None
        )
        if timer_id is None:
            raise TimersFullError(f"all {self.max_timers} timer slots are in use")
        self._timers[timer_id] = _Timer(
            task_id=task_id, period=period, cycles=cycles, countdown=period
        )
        return timer_id

    def start(self, timer_id: int) -> None:
        """Let a timer count down on each tick."""
        self._get(timer_id).active = True

    def stop(self, timer_id: int) -> None:
        """Pause a timer, keeping its remaining countdown."""
        self._get(timer_id).active = False

    def delete(self, timer_id: int) -> None:
        """Remove a timer and free its slot."""
        self._get(timer_id)
        del self._timers[timer_id]

    def is_active(self, timer_id: int) -> bool:
        """Return whether a timer is currently running."""
        return self._get(timer_id).active

    def tick(self) -> None:
        """Advance every running timer by one tick."""
        for timer_id in sorted(self._timers):
            timer = self._timers.get(timer_id)
            if timer is None or not timer.active:
                continue
            timer.countdown = (timer.countdown - 1) % _UINT32
            if timer.countdown:
                continue
            with suppress(BadTaskIdError):
                self.scheduler.set_task(timer.task_id)
            if timer.cycles != 1:
                if timer.cycles > 0:
                    timer.cycles -= 1
                timer.countdown = timer.period
            else:
                del self._timers[timer_id]