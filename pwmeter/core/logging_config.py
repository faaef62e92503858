"""
Logging Configuration for pwmeter

The library itself only emits records (NullHandler on the package
logger); this module wires handlers up for the command-line tool.

Features:
- Colored console output on a TTY
- Optional rotating file handler
- Level from argument, PWMETER_LOG_LEVEL, or WARNING
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from .config import Config


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        'DEBUG': '\033[36m',  # Cyan
        'INFO': '\033[32m',  # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',  # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # copy so other handlers keep the plain level name
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
            )
        return super().format(record)


class LoggingConfig:
    """Centralized logging configuration"""

    DEFAULT_LOG_LEVEL = "WARNING"
    DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
    DEFAULT_BACKUP_COUNT = 5

    @staticmethod
    def resolve_level(log_level: Optional[str] = None, config: Optional[Config] = None) -> int:
        """Turn a level name into a logging constant; unknown names fall back to the default."""
        if not log_level:
            config = config or Config(env_file=None)
            log_level = config.get("PWMETER_LOG_LEVEL", LoggingConfig.DEFAULT_LOG_LEVEL)
        level = logging.getLevelName(str(log_level).upper())
        if not isinstance(level, int):
            logging.getLogger(__name__).warning(
                f"Unknown log level {log_level!r}, using {LoggingConfig.DEFAULT_LOG_LEVEL}")
            level = logging.getLevelName(LoggingConfig.DEFAULT_LOG_LEVEL)
        return level

    @staticmethod
    def setup_logging(
            log_level: Optional[str] = None,
            log_file: Optional[str] = None,
            enable_console: bool = True,
            enable_colors: bool = True,
            config: Optional[Config] = None,
    ) -> None:
        """Configure the root logger for command-line use"""
        level = LoggingConfig.resolve_level(log_level, config)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        detailed_format = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Console handler (stderr: stdout carries the report)
        if enable_console and sys.stderr is not None:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)

            is_tty = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

            if enable_colors and is_tty:
                console_handler.setFormatter(ColoredFormatter(
                    '%(asctime)s - %(levelname)s - %(message)s',
                    datefmt='%H:%M:%S'
                ))
            else:
                console_handler.setFormatter(detailed_format)

            root_logger.addHandler(console_handler)

        # File handler
        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(exist_ok=True, parents=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=LoggingConfig.DEFAULT_MAX_BYTES,
                backupCount=LoggingConfig.DEFAULT_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_format)
            root_logger.addHandler(file_handler)

        root_logger.debug("Logging initialized.")
