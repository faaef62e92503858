"""
Configuration Manager with Environment Variables Support

Used by the command-line interface and logging setup only; the library
functions take their policy and scale as arguments and never read it.

Usage:
    from pwmeter.core.config import Config

    config = Config()
    level = config.get("PWMETER_LOG_LEVEL", "WARNING")
    rate = config.get_float("PWMETER_GUESSES_PER_SECOND")
"""
import os
import json
import logging
from typing import Any, Optional, Dict
from pathlib import Path
from dotenv import load_dotenv

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Config:
    """
    Configuration lookup that supports:
    - Environment variables (.env)
    - JSON configuration files
    - Default values
    - Type conversion
    """

    def __init__(self, env_file: Optional[str] = ".env", config_file: Optional[str] = None):
        self._env_loaded = False
        self._config_cache: Dict[str, Any] = {}
        self._config_file_path = Path(config_file) if config_file else None

        if env_file:
            self._load_env(Path(env_file))

        if self._config_file_path:
            self._load_json_config()

    def _load_env(self, env_file: Path):
        """Load environment variables from .env file"""
        if env_file.exists():
            load_dotenv(env_file)
            self._env_loaded = True
            logger.debug(f"Environment variables loaded from {env_file}")
        else:
            logger.debug(f"{env_file} not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if not self._config_file_path.exists():
            raise ConfigurationError(
                f"Config file not found: {self._config_file_path}",
                code="CONFIG_NOT_FOUND",
            )
        try:
            with open(self._config_file_path, 'r', encoding='utf-8') as f:
                self._config_cache = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in {self._config_file_path}",
                code="CONFIG_INVALID",
                detail=str(e),
            ) from e
        logger.debug(f"Configuration loaded from {self._config_file_path}")

    def get(
            self,
            key: str,
            default: Any = None,
            required: bool = False,
            from_env: bool = True
    ) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable (if from_env=True)
        2. JSON config file
        3. Default value

        Raises:
            ConfigurationError: If required=True and key not found
        """
        if from_env:
            env_value = os.getenv(key)
            if env_value is not None:
                return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in .env or the JSON config file",
                code="CONFIG_MISSING",
            )

        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key, default)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')

        return bool(value)

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """Get integer configuration value"""
        value = self.get(key, default)
        if value is None:
            return None

        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid int value for '{key}': {value}, using default")
            return default

    def get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        """Get float configuration value"""
        value = self.get(key, default)
        if value is None:
            return None

        try:
            return float(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid float value for '{key}': {value}, using default")
            return default

    def get_path(self, key: str, default: Optional[str] = None) -> Optional[Path]:
        """Get Path configuration value"""
        value = self.get(key, default)
        return Path(value) if value else None
