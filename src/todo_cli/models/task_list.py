"""
Task list for todo-cli.

This module provides the TaskList collection and its mutation operations.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from ..errors import TaskNotFoundError
from .todo_task import TodoTask

logger = logging.getLogger(__name__)


class TaskList:
    """In-memory task collection loaded from and saved to the store."""

    def __init__(self, tasks: Optional[Iterable[TodoTask]] = None):
        self._tasks: List[TodoTask] = list(tasks or [])
        self.changed = False

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[TodoTask]:
        return iter(self._tasks)

    def list(self) -> Iterator[TodoTask]:
        """Iterate tasks in current order; each call starts over."""
        return iter(self._tasks)

    def indices(self) -> List[int]:
        return [task.index for task in self._tasks]

    def _next_index(self) -> int:
        return max(self.indices(), default=0) + 1

    def add(self, title: str) -> TodoTask:
        """Append a new incomplete task after the current highest index."""
        task = TodoTask(index=self._next_index(), title=title)
        self._tasks.append(task)
        self.changed = True
        logger.debug("Added task %s at index %d", task.id, task.index)
        return task

    def mark_done(self, index: int) -> TodoTask:
        """Mark the task at `index` complete and return it."""
        for task in self._tasks:
            if task.index == index:
                if not task.is_complete:
                    task.is_complete = True
                    self.changed = True
                return task
        raise TaskNotFoundError(index)

    def remove(self, index: int) -> List[TodoTask]:
        """Remove the task at `index`, then renumber the rest as 1..N."""
        removed = [task for task in self._tasks if task.index == index]
        if not removed:
            raise TaskNotFoundError(index)

        remaining = [task for task in self._tasks if task.index != index]
        remaining.sort(key=lambda t: t.index)
        for new_index, task in enumerate(remaining, start=1):
            task.index = new_index

        self._tasks = remaining
        self.changed = True
        logger.debug("Removed %d task(s) at index %d; %d left", len(removed), index, len(remaining))
        return removed

    def clear(self) -> None:
        """Drop every task."""
        self._tasks.clear()
        self.changed = True
