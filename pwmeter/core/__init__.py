# core/__init__.py
"""
pwmeter Core Module
===================

Ambient support for the command-line tool.

Public API:
    - Configuration: Config
    - Logging: LoggingConfig, ColoredFormatter
"""

from .config import Config
from .logging_config import LoggingConfig, ColoredFormatter

__all__ = [
    "Config",
    "LoggingConfig",
    "ColoredFormatter",
]
