# softsched

A small cooperative scheduler and a bank of software timers built on top of it.

- `softsched.scheduler.Scheduler` keeps a fixed-size table of tasks (plain
  callables taking no arguments). Setting a task marks it pending;
  `run_next()` runs the pending task with the lowest id, so lower ids have
  higher priority.
- `softsched.stimer.TimerBank` holds a fixed number of timers. Each timer
  belongs to a task id on a scheduler. Every call to `tick()` counts active
  timers down by one; when one reaches zero its task is set on the scheduler.
  A timer repeats forever when created with `cycles=0`, otherwise it fires that
  many times and then deletes itself.

## Installation

```
pip install .
```

## Usage

```python
from softsched.scheduler import Scheduler
from softsched.stimer import TimerBank

scheduler = Scheduler(max_tasks=256)
timers = TimerBank(scheduler, max_timers=32)

counts = {"blink": 0}

def blink():
    counts["blink"] += 1

blink_id = scheduler.register_task(blink)
timer_id = timers.create(blink_id, period=4, cycles=0)
timers.start(timer_id)

for _ in range(12):
    timers.tick()          # e.g. from a periodic interrupt
    scheduler.run_next()   # from the main loop

print(counts["blink"])     # 3
```

## Scheduler

- `Scheduler(max_tasks=256)` – `max_tasks` below 1 raises `ValueError`.
- `register_task(task)` returns the new task's id; ids are handed out in
  registration order starting at 0.
- `set_task(task_id)` flags a registered task to run. Setting it again before
  it runs has no further effect.
- `run_next()` runs the flagged task with the lowest id, clears its flag after
  the task returns (even if it raises) and returns the id that ran, or `None`
  when nothing was flagged.
- `pending()` returns the flagged task ids in the order they would run.
- `len(scheduler)` is the number of registered tasks.

`lowest_set_bit(mask)` is the helper used to pick the next task; it returns the
index of the lowest set bit of a positive integer.

## Timers

- `TimerBank(scheduler, max_timers=32)` – `max_timers` below 1 raises
  `ValueError`.
- `create(task_id, period, cycles=0)` makes a stopped timer in the lowest free
  slot and returns its id. `period` is kept as an unsigned 32-bit value and
  `cycles` as an unsigned 16-bit value, so a `period` of 0 counts down the full
  32-bit range. The task id is not checked at creation; if it is not registered
  when the timer fires, the firing is ignored.
- `start(timer_id)` / `stop(timer_id)` resume and pause a timer; a paused timer
  keeps its remaining countdown.
- `delete(timer_id)` removes a timer and frees its slot.
- `is_active(timer_id)` tells whether a timer is currently counting.
- `tick()` advances every running timer by one tick, in order of timer id.
- `len(bank)` is the number of existing timers.

## Errors

- `TasksFullError` – no free task slot is left (a `SchedulerError`).
- `BadTaskIdError` – a task id that was never registered (a `SchedulerError`).
- `TimersFullError` – every timer slot is in use (a `TimerError`).
- `BadTimerIdError` – a timer id that does not name an existing timer, for
  example after the timer was deleted (a `TimerError`).

## What it does not do

There is no clock, thread or event loop: nothing calls `tick()` or
`run_next()` for you. Tasks are not removable once registered, and tasks run
to completion one at a time on the caller's thread.

## Running the tests

```
pip install .[test]
pytest
```