"""
Error types for todo-cli.

Lower layers raise these; the CLI turns them into messages and exit codes.
"""

from pathlib import Path
from typing import Optional


class TodoError(Exception):
    """Base class for errors raised by todo-cli."""


class StoreError(TodoError):
    """Reading or writing the task store failed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class StoreIOError(StoreError):
    """The store file or data directory could not be read, written or created."""


class StoreDecodeError(StoreError):
    """The store file exists but does not hold a valid task array."""


class TaskNotFoundError(TodoError):
    """No task carries the requested index."""

    def __init__(self, index: int):
        super().__init__(f"Task with index {index} not found.")
        self.index = index
