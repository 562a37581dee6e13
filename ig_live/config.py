"""
Centralized configuration management.

To avoid leaking session cookies through committed files, hidden dotfiles are
not auto-loaded. Configuration is read from:
1) `env.example` (committed, safe placeholders)
2) `env.local` (optional, MUST NOT be committed)
3) System environment variables (highest priority)
"""

import os
from pathlib import Path

from dotenv import dotenv_values
from loguru import logger

DEFAULT_API_BASE_URL = "https://i.instagram.com/api/v1/"
DEFAULT_HTTP_TIMEOUT = 30.0

_TRUTHY = {"1", "true", "yes", "on"}


class EnvironConfig:
    """
    Singleton configuration class that loads environment variables from env files
    and system environment, providing dictionary-like access with default values.
    """

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(EnvironConfig, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = {}
            self._load_config()
            EnvironConfig._initialized = True

    def _load_config(self):
        """
        Load configuration from env files and system environment.

        Priority order (later overrides earlier):
        1. env.example (committed placeholders)
        2. env.local (developer-local, not committed)
        3. System environment variables (highest priority)
        """
        root = Path(__file__).parent.parent

        example_path = root / "env.example"
        if example_path.exists():
            self._config.update(dotenv_values(example_path))
            logger.info("Loaded environment variables from {}", example_path)

        local_path = root / "env.local"
        if local_path.exists():
            self._config.update(dotenv_values(local_path))
            logger.info("Loaded and overrode environment variables from {}", local_path)

        self._config.update(os.environ)

    def __getitem__(self, key):
        """
        Get configuration value by key.

        Raises:
            KeyError: If key not found
        """
        if key not in self._config:
            raise KeyError(f"Configuration key '{key}' not found")

        return self._config[key]

    def get(self, key, default=None):
        return self._config.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._config.get(key)
        if value is None or str(value).strip() == "":
            return default
        return str(value).strip().lower() in _TRUTHY

    def get_float(self, key: str, default: float) -> float:
        value = self._config.get(key)
        if value is None or str(value).strip() == "":
            return default
        try:
            return float(value)
        except ValueError:
            logger.warning("Invalid float for {}: {!r}, using {}", key, value, default)
            return default

    def get_api_base_url(self) -> str:
        """Platform API base URL, always ending with a slash."""
        url = self.get("IG_API_BASE_URL") or DEFAULT_API_BASE_URL
        return url.rstrip("/") + "/"

    def get_http_timeout(self) -> float:
        return self.get_float("IG_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)

    def clear(self):
        """
        Clear configuration.
        Useful for testing or when configuration files change.
        """
        self._config.clear()
        logger.info("Configuration cleared")

    def reload(self):
        """
        Reload configuration from files and environment.
        Useful for testing or when configuration files change.
        """
        self._config.clear()
        self._load_config()
        logger.info("Configuration reloaded")

    def __contains__(self, key):
        return key in self._config

    def __iter__(self):
        return iter(self._config)

    def keys(self):
        return self._config.keys()

    def values(self):
        return self._config.values()

    def items(self):
        return self._config.items()


config = EnvironConfig()
