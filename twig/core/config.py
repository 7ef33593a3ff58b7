"""Configuration management for Twig VCS.

This module reads repository-local and global INI configuration, with
environment variables taking precedence over both.
"""

import configparser
import os
from pathlib import Path
from typing import List, Optional

DEFAULT_PROTECTED = 'Makefile'
DEFAULT_LOG_LEVEL = 'WARNING'


class Config:
    """
    Reads Twig configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.twigconfig
    - Repository config: .twig/config

    Repository config takes precedence over global config.
    Environment variables take highest precedence.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.twigconfig'

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
            self._global_config = configparser.ConfigParser()
            if self.GLOBAL_CONFIG_PATH.exists():
                self._global_config.read(self.GLOBAL_CONFIG_PATH)
        return self._global_config

    @property
    def repo_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return repository configuration."""
        if self._repo_config is None and self.repo_config_path:
            self._repo_config = configparser.ConfigParser()
            if self.repo_config_path.exists():
                self._repo_config.read(self.repo_config_path)
        return self._repo_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (TWIG_<SECTION>_<KEY>)
        2. Repository config
        3. Global config
        4. Fallback value

        Args:
            section: Config section (e.g., 'core', 'log')
            key: Config key (e.g., 'protected', 'level')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_value = os.environ.get(f"TWIG_{section.upper()}_{key.upper()}")
        if env_value is not None:
            return env_value

        if self.repo_config and self.repo_config.has_option(section, key):
            return self.repo_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        return fallback

    def get_list(self, section: str, key: str, fallback: str = '') -> List[str]:
        """Get a comma-separated value as a list of stripped, non-empty items."""
        value = self.get(section, key, fallback) or ''
        return [item.strip() for item in value.split(',') if item.strip()]

    def protected_names(self) -> List[str]:
        """Filenames checkout, reset and status must never touch."""
        return self.get_list('core', 'protected', DEFAULT_PROTECTED)

    def log_level(self) -> str:
        return (self.get('log', 'level', DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()


def get_config(repo=None) -> Config:
    """
    Get a Config instance.

    Args:
        repo: Repository instance, or None for global-only config

    Returns:
        Config instance
    """
    if repo:
        return Config(repo.config_file)
    return Config()
