"""Cooperative task scheduler with priority given to the lowest task id."""

from __future__ import annotations

from typing import Callable

DEFAULT_MAX_TASKS = 256

Task = Callable[[], object]


class SchedulerError(Exception):
    """Base class for scheduler errors."""


class TasksFullError(SchedulerError):
    """Raised when no more tasks can be registered."""


class BadTaskIdError(SchedulerError):
    """Raised when a task id does not name a registered task."""


def lowest_set_bit(mask: int) -> int:
    """Return the index of the lowest set bit of a non-zero mask."""
    if mask <= 0:
        raise ValueError("mask must be a positive integer")
    return (mask & -mask).bit_length() - 1


class Scheduler:
    """Registry of tasks that run once each time they are flagged.

    Task ids are handed out in registration order. When several tasks are
    flagged, the one with the lowest id runs first.
    """

    def __init__(self, max_tasks: int = DEFAULT_MAX_TASKS) -> None:
        if max_tasks < 1:
            raise ValueError("max_tasks must be at least 1")
        self.max_tasks = max_tasks
        self._tasks: list[Task] = []
        self._flags = 0

    def __len__(self) -> int:
        return len(self._tasks)

    def register_task(self, task: Task) -> int:
        """Register a task and return its id."""
        if len(self._tasks) >= self.max_tasks:
            raise TasksFullError(f"all {self.max_tasks} task slots are in use")
        self._tasks.append(task)
        return len(self._tasks) - 1

    def set_task(self, task_id: int) -> None:
        """Flag a registered task to be run."""
        if not 0 <= task_id < len(self._tasks):
            raise BadTaskIdError(f"no task with id {task_id}")
        self._flags |= 1 << task_id

    def pending(self) -> tuple[int, ...]:
        """Return the ids of flagged tasks in the order they would run."""
        return tuple(i for i in range(len(self._tasks)) if self._flags >> i & 1)

    def run_next(self) -> int | None:
        """Run the flagged task with the lowest id.

        Returns the id of the task that ran, or None when nothing was flagged.
        The flag is cleared after the task returns, so a task that flags
        itself while running is not run again.
        """
        if not self._flags:
            return None
        run_id = lowest_set_bit(self._flags)
        try:
            self._tasks[run_id]()
        finally:
            self._flags &= ~(1 << run_id)
        return run_id