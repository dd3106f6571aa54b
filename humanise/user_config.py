"""
User configuration management for humanise.

Supports configuration from multiple sources (in order of priority):
1. Runtime parameters (highest priority)
2. Environment variables
3. User config file (~/.humanise/config.json)
4. Default values from config.py (lowest priority)

Only the command line interface reads this configuration. The library
functions take every setting as an argument.

Example config.json:
{
    "verbose": false
}
"""

import json
import os
from pathlib import Path
from typing import Any, Optional
import logging

from .config import CONFIG_DIR, DEFAULT_VERBOSE

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {'1', 'true', 'yes', 'on'}
_FALSE_STRINGS = {'0', 'false', 'no', 'off'}


def _to_bool(value: Any, default: bool) -> bool:
    """Interpret a config or environment value as a boolean."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    if isinstance(value, int):
        return value != 0
    logger.warning(f"Ignoring unrecognised boolean setting {value!r}, using {default}")
    return default


class UserConfig:
    """
    Reads humanise settings from the environment and the user config file.

    The file is read once, on first lookup, and cached until reload().
    """

    def __init__(self):
        self._file_settings: Optional[dict] = None

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        env_dir = os.getenv('HUMANISE_CONFIG_DIR')
        if env_dir:
            return Path(env_dir)
        return Path(CONFIG_DIR)

    @property
    def config_file_path(self) -> Path:
        """Get the configuration file path."""
        return self.config_dir / 'config.json'

    def _read_file_settings(self) -> dict:
        if not self.config_file_path.exists():
            return {}

        try:
            with open(self.config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config file {self.config_file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {self.config_file_path}: expected a JSON object")
            return {}

        logger.debug(f"Loaded configuration from {self.config_file_path}")
        return data

    def reload(self):
        """Forget cached file contents so the next lookup reads the file again."""
        self._file_settings = None

    def _lookup(self, key: str, env_var: str) -> Any:
        """Return the environment value, else the file value, else None."""
        env_value = os.getenv(env_var)
        if env_value is not None:
            return env_value

        if self._file_settings is None:
            self._file_settings = self._read_file_settings()
        return self._file_settings.get(key)

    @property
    def verbose(self) -> bool:
        """Use full unit words (True) or abbreviations (False)."""
        value = self._lookup('verbose', 'HUMANISE_VERBOSE')
        if value is None:
            return DEFAULT_VERBOSE
        return _to_bool(value, DEFAULT_VERBOSE)

    def create_example_config(self) -> bool:
        """
        Create an example configuration file.

        Returns:
            True if the file was written, False on error
        """
        example_config = {
            "_comment": "humanise user configuration",
            "verbose": DEFAULT_VERBOSE,
        }

        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, 'w', encoding='utf-8') as f:
                json.dump(example_config, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to create example config: {e}")
            return False

        logger.info(f"Created example config file at {self.config_file_path}")
        self.reload()
        return True


# Global instance
_user_config = UserConfig()


def get_user_config() -> UserConfig:
    """Get the global UserConfig instance."""
    return _user_config
