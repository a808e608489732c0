"""
Delayed tasks for the frame loop.

Everything runs on the single frame thread, so "later" means "on the
first frame whose timestamp reaches the due time". A task carries a
snapshot of the view it was scheduled for; if the view has moved on by
the time it fires, the task is dropped instead of acting on stale state.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Hashable, List, Optional


@dataclass
class DelayedTask:
    due: float                       # ms
    expected: Hashable               # view key at schedule time
    action: Callable[[], None]
    name: str = ""


class TaskScheduler:
    """
    Fire-and-forget delayed callbacks with a staleness guard.

    Parameters
    ----------
    current_key : callable returning the live view key to compare against
    """

    def __init__(self, current_key: Callable[[], Hashable]):
        self._current_key = current_key
        self._tasks: List[DelayedTask] = []

    def schedule(self, delay_ms: float, now: float, action: Callable[[], None],
                 name: str = "") -> DelayedTask:
        task = DelayedTask(now + delay_ms, self._current_key(), action, name)
        self._tasks.append(task)
        return task

    def run_due(self, now: float) -> int:
        """Run (or drop, if stale) every task due at `now`. Returns tasks run."""
        due = [t for t in self._tasks if t.due <= now]
        if not due:
            return 0
        self._tasks = [t for t in self._tasks if t.due > now]

        ran = 0
        for task in sorted(due, key=lambda t: t.due):
            if task.expected != self._current_key():
                continue
            task.action()
            ran += 1
        return ran

    def pending(self, name: Optional[str] = None) -> List[DelayedTask]:
        return [t for t in self._tasks if name is None or t.name == name]

    def __len__(self) -> int:
        return len(self._tasks)
