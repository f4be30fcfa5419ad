"""
Pytest configuration and shared fixtures.
"""

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

LEGACY_RECORDS = [
    {
        "id": "6f1c1c52-3c1b-4a8e-9a57-2d3cfa0a4e11",
        "index": 1,
        "title": "Buy milk",
        "is_complited": False,
        "created_at": "2025-03-01T08:15:30.123456789Z",
    },
    {
        "id": "0b6e8f0e-9d3e-4c55-8b0a-5f8f5e0c7a22",
        "index": 2,
        "title": "Write report",
        "is_complited": True,
        "created_at": "2025-03-02T17:45:00Z",
    },
    {
        "id": "d2a4b8f1-61a7-47c9-b7de-6c2f0f1e9b33",
        "index": 3,
        "title": "Call Anna",
        "is_complited": False,
        "created_at": "2025-03-03T09:00:00.5Z",
    },
]


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the application at a temporary data directory."""
    for name in ("TODO_CLI_STORE_FILENAME", "TODO_CLI_LOG_LEVEL", "TODO_CLI_APP_NAME"):
        monkeypatch.delenv(name, raising=False)
    target = tmp_path / "todo-cli"
    monkeypatch.setenv("TODO_CLI_DATA_DIR", str(target))
    monkeypatch.setenv("TODO_CLI_LOG_TO_FILE", "true")
    return target


@pytest.fixture
def store_path(data_dir: Path) -> Path:
    return data_dir / "todos.json"


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Task records as written by earlier releases of the tool."""
    return [dict(record) for record in LEGACY_RECORDS]


@pytest.fixture(autouse=True)
def reset_app_logger() -> Generator[None, None, None]:
    """Close log files opened during a test."""
    yield
    app_logger = logging.getLogger("todo_cli")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()


def pytest_collection_modifyitems(config: Any, items: list[Any]) -> None:
    """Add markers based on file location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "cli" in path:
            item.add_marker(pytest.mark.cli)
