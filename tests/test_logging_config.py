"""
tests/test_logging_config.py
============================
Covers core/logging_config.py.
"""
import logging
import logging.handlers

import pytest

from pwmeter.core.config import Config
from pwmeter.core.logging_config import ColoredFormatter, LoggingConfig


class TestResolveLevel:

    @pytest.mark.parametrize("name,expected", [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("Error", logging.ERROR),
    ])
    def test_names(self, name, expected):
        assert LoggingConfig.resolve_level(name) == expected

    def test_unknown_falls_back(self):
        assert LoggingConfig.resolve_level("chatty") == logging.WARNING

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("PWMETER_LOG_LEVEL", "info")
        assert LoggingConfig.resolve_level(config=Config(env_file=None)) == logging.INFO

    def test_default(self, monkeypatch):
        monkeypatch.delenv("PWMETER_LOG_LEVEL", raising=False)
        assert LoggingConfig.resolve_level() == logging.WARNING


class TestSetupLogging:

    def test_console_only(self, restore_root_logger):
        LoggingConfig.setup_logging("INFO", enable_colors=False)
        root = restore_root_logger
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "pwmeter.log"
        LoggingConfig.setup_logging("DEBUG", log_file=str(log_file), enable_console=False)
        root = restore_root_logger
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, logging.handlers.RotatingFileHandler)
        assert handler.maxBytes == LoggingConfig.DEFAULT_MAX_BYTES
        assert handler.backupCount == LoggingConfig.DEFAULT_BACKUP_COUNT
        handler.flush()
        assert "Logging initialized." in log_file.read_text(encoding="utf-8")

    def test_repeat_setup_replaces_handlers(self, restore_root_logger):
        LoggingConfig.setup_logging("INFO", enable_colors=False)
        LoggingConfig.setup_logging("INFO", enable_colors=False)
        assert len(restore_root_logger.handlers) == 1


class TestColoredFormatter:

    def test_colours_level_name(self):
        record = logging.LogRecord("pwmeter", logging.WARNING, __file__, 1, "hello", None, None)
        out = ColoredFormatter("%(levelname)s %(message)s").format(record)
        assert ColoredFormatter.COLORS["WARNING"] in out
        assert out.endswith("hello")

    def test_record_left_untouched(self):
        record = logging.LogRecord("pwmeter", logging.ERROR, __file__, 1, "boom", None, None)
        ColoredFormatter("%(levelname)s").format(record)
        assert record.levelname == "ERROR"
