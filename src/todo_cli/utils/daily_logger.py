"""
Daily logging utility for todo-cli.

This module provides a daily logging handler that writes one JSON object per
line and starts a new log file each day.
"""

import json
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER_NAME = "todo_cli"


class DailyJsonFormatter(logging.Formatter):
    """Custom JSON formatter for daily logs."""

    def __init__(self, component: Optional[str] = None):
        super().__init__()
        self.component = component

    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "file": record.filename,
            "line": record.lineno,
        }

        if self.component:
            log_record["component"] = self.component

        if hasattr(record, "json_data"):
            log_record.update(record.json_data)

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record, ensure_ascii=False)


class DailyLogHandler(TimedRotatingFileHandler):
    """Daily rotating file handler with JSON formatting."""

    def __init__(self, log_dir: Union[str, Path], component: str, level: int = logging.INFO):
        component_dir = Path(log_dir) / component
        component_dir.mkdir(parents=True, exist_ok=True)

        log_file = component_dir / f"{component}.log"

        super().__init__(
            filename=str(log_file),
            when="midnight",
            interval=1,
            backupCount=30,  # Keep 30 days of logs
            encoding="utf-8",
            delay=True,
        )

        self.setFormatter(DailyJsonFormatter(component=component))
        self.setLevel(level)


def setup_daily_logger(
    component: str,
    log_dir: Union[str, Path] = "logs",
    level: int = logging.INFO,
    to_file: bool = True,
) -> logging.Logger:
    """
    Set up the application logger for a component.

    Records from every `todo_cli.*` module reach the handler installed here.

    Args:
        component: Component name used for the log subdirectory (e.g. 'cli')
        log_dir: Base log directory (default: 'logs')
        level: Logging level (default: INFO)
        to_file: Attach the daily file handler; otherwise log nowhere

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if to_file:
        logger.addHandler(DailyLogHandler(log_dir, component, level))
    else:
        logger.addHandler(logging.NullHandler())

    # Console output belongs to the CLI, not to logging.
    logger.propagate = False

    return logger


def get_daily_logger(component: str) -> logging.Logger:
    """Get the logger for a component under the application logger."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")
