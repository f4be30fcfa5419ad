"""
Unit tests for the daily JSON logger.
"""

import json
import logging

from todo_cli.utils.daily_logger import DailyLogHandler, get_daily_logger, setup_daily_logger


class TestDailyLogger:
    def test_writes_json_lines(self, tmp_path):
        setup_daily_logger("cli", log_dir=tmp_path, level=logging.DEBUG)
        logger = get_daily_logger("store")

        logger.info("Saved tasks", extra={"json_data": {"count": 3}})
        for handler in logging.getLogger("todo_cli").handlers:
            handler.flush()

        lines = (tmp_path / "cli" / "cli.log").read_text(encoding="utf-8").splitlines()
        entry = json.loads(lines[-1])

        assert entry["message"] == "Saved tasks"
        assert entry["level"] == "INFO"
        assert entry["component"] == "cli"
        assert entry["logger"] == "todo_cli.store"
        assert entry["count"] == 3

    def test_respects_level(self, tmp_path):
        setup_daily_logger("cli", log_dir=tmp_path, level=logging.WARNING)
        get_daily_logger("store").info("hidden")

        log_file = tmp_path / "cli" / "cli.log"
        assert not log_file.exists() or "hidden" not in log_file.read_text()

    def test_setup_replaces_handlers(self, tmp_path):
        setup_daily_logger("cli", log_dir=tmp_path)
        logger = setup_daily_logger("cli", log_dir=tmp_path)

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], DailyLogHandler)
        assert logger.propagate is False

    def test_without_file(self, tmp_path):
        logger = setup_daily_logger("cli", log_dir=tmp_path / "logs", to_file=False)

        logger.error("nowhere")

        assert not (tmp_path / "logs").exists()
        assert isinstance(logger.handlers[0], logging.NullHandler)
