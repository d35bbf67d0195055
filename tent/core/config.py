"""Configuration management for Tent.

This module provides a clean interface for reading and writing
both repository-local and global configuration files.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict

from tent.core.errors import MalformedStateError, TentIOError

# Values used when no environment variable or config file sets a key.
DEFAULTS = {
    ('color', 'ui'): 'true',
    ('core', 'abbrev'): '7',
    ('core', 'loglevel'): 'WARNING',
}

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def split_key(key: str):
    """Split 'section.option' into its parts; bare keys live in [core]."""
    return tuple(key.split('.', 1)) if '.' in key else ('core', key)


class Config:
    """
    Manages Tent configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.tentconfig
    - Repository config: .tent/config

    Repository config takes precedence over global config.
    Environment variables take highest precedence.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.tentconfig'

    def __init__(self, repo_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            repo_config_path: Path to repository config file, if in a repo
        """
        self.repo_config_path = repo_config_path
        self._global_config = None
        self._repo_config = None

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = self._load(self.GLOBAL_CONFIG_PATH)
        return self._global_config

    @property
    def repo_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return repository configuration."""
        if self._repo_config is None and self.repo_config_path:
            self._repo_config = self._load(self.repo_config_path)
        return self._repo_config

    @staticmethod
    def _load(path: Path) -> configparser.ConfigParser:
        # Values are stored verbatim; "%" has no special meaning
        config = configparser.ConfigParser(interpolation=None)
        if path.exists():
            try:
                config.read(path)
            except configparser.Error as e:
                raise MalformedStateError(f'config {path}', str(e)) from e
        return config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (TENT_<SECTION>_<KEY>)
        2. Repository config
        3. Global config
        4. Fallback value
        5. Built-in default

        Args:
            section: Config section (e.g., 'core', 'color')
            key: Config key (e.g., 'abbrev', 'ui')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"TENT_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.repo_config and self.repo_config.has_option(section, key):
            return self.repo_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        if fallback is not None:
            return fallback
        return DEFAULTS.get((section, key))

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """Get a boolean value; unrecognised values give fallback."""
        value = self.get(section, key)
        if value is None:
            return fallback
        value = value.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        return fallback

    def get_int(self, section: str, key: str, fallback: int = 0) -> int:
        """Get an integer value; unparsable values give fallback."""
        value = self.get(section, key)
        try:
            return int(value)
        except (TypeError, ValueError):
            return fallback

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise repo config
        """
        if global_config:
            config = self.global_config
            config_path = self.GLOBAL_CONFIG_PATH
        else:
            if not self.repo_config_path:
                raise ValueError("No repository config path available")
            config = self.repo_config
            config_path = self.repo_config_path

        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)

        try:
            with open(config_path, 'w') as f:
                config.write(f)
        except OSError as e:
            raise TentIOError(str(config_path), e.strerror or str(e)) from e

    def list_all(self, global_only: bool = False) -> Dict[str, str]:
        """
        List configuration values as 'section.key' -> value.

        Repository values override global ones.
        """
        result = {}
        for section in self.global_config.sections():
            for key, value in self.global_config.items(section):
                result[f"{section}.{key}"] = value

        if not global_only and self.repo_config:
            for section in self.repo_config.sections():
                for key, value in self.repo_config.items(section):
                    result[f"{section}.{key}"] = value

        return result

