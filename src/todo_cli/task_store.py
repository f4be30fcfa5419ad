"""
Task store for todo-cli.

The whole task list lives in one JSON file that is read in full at start-up
and rewritten in full on save. There is no locking and no atomic rename.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from .errors import StoreDecodeError, StoreIOError
from .models import StoredTodoTask, TaskList

logger = logging.getLogger(__name__)

_records = TypeAdapter(List[StoredTodoTask])


class TaskStore:
    """Load and save the task list file."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def ensure_data_dir(self) -> None:
        """Create the data directory and any missing parents."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Cannot create data directory %s: %s", self._path.parent, e)
            raise StoreIOError(
                f"Cannot create data directory {self._path.parent}: {e}", self._path
            ) from e

    def initialize(self) -> None:
        """Make sure the data directory and an (empty) store file exist."""
        self.ensure_data_dir()
        if self._path.exists():
            return
        try:
            self._path.touch()
        except OSError as e:
            logger.error("Cannot create store %s: %s", self._path, e)
            raise StoreIOError(f"Cannot create {self._path}: {e}", self._path) from e
        logger.info("Created empty task store at %s", self._path)

    def load(self) -> TaskList:
        """Read the store file; a missing file is an error, a blank one is empty."""
        try:
            data = self._path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Cannot read %s: %s", self._path, e)
            raise StoreIOError(f"Cannot read {self._path}: {e}", self._path) from e
        except UnicodeDecodeError as e:
            logger.error("Cannot decode %s: %s", self._path, e)
            raise StoreDecodeError(f"Cannot decode {self._path}: {e}", self._path) from e

        trimmed = data.strip()
        if not trimmed:
            logger.debug("Store %s is empty", self._path)
            return TaskList()

        try:
            tasks = _records.validate_json(trimmed)
        except ValidationError as e:
            logger.error("Cannot decode %s: %s", self._path, e)
            raise StoreDecodeError(
                f"Cannot decode {self._path}: {e.error_count()} error(s), "
                f"first: {e.errors()[0]['msg']}",
                self._path,
            ) from e

        logger.debug("Loaded %d task(s) from %s", len(tasks), self._path)
        return TaskList(tasks)

    def save(self, tasks: TaskList) -> None:
        """Overwrite the store file with the full task list."""
        records = [task.to_record() for task in tasks.list()]
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error("Cannot write %s: %s", self._path, e)
            raise StoreIOError(f"Cannot write {self._path}: {e}", self._path) from e

        logger.debug("Saved %d task(s) to %s", len(records), self._path)
