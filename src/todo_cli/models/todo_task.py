"""
Todo task model for todo-cli.

This module provides the TodoTask model for a single persisted task.
"""

import re
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Older store files carry nanoseconds; datetime keeps microseconds.
_EXTRA_FRACTION = re.compile(r"(\.\d{6})\d+")

STATUS_DONE = "✅"
STATUS_OPEN = "❌"
DISPLAY_TIME_FORMAT = "%H:%M, %d.%m.%Y"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TodoTask(BaseModel):
    """A single task in the list.

    `id` is the permanent identity; `index` is the user-facing handle and is
    renumbered whenever a task is removed.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(default_factory=uuid4)
    index: int = Field(..., ge=0)
    title: str
    is_complete: bool = Field(default=False, alias="is_complited")
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("created_at", mode="before")
    @classmethod
    def trim_fraction(cls, v: Any) -> Any:
        """Drop sub-microsecond digits so stored nanoseconds still parse."""
        if isinstance(v, str):
            return _EXTRA_FRACTION.sub(r"\1", v)
        return v

    @field_validator("created_at")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        """Naive timestamps are taken as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    def to_record(self) -> dict[str, Any]:
        """Serialise to the on-disk record layout."""
        return self.model_dump(mode="json", by_alias=True)

    def format(self) -> str:
        """Render as `{index}. [{glyph}] {title} - {local time}`."""
        status = STATUS_DONE if self.is_complete else STATUS_OPEN
        created_local = self.created_at.astimezone()
        return (
            f"{self.index}. [{status}] {self.title} - "
            f"{created_local.strftime(DISPLAY_TIME_FORMAT)}"
        )


class StoredTodoTask(TodoTask):
    """A task read back from the store; every on-disk field is required."""

    id: UUID
    is_complete: bool = Field(..., alias="is_complited")
    created_at: datetime
