"""Configuration service for managing Tasklist configuration.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json
- Creating the config file with defaults on first run
- Reading and writing values by dotted key
- Building the storage strategy for the configured backend
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir

from tasklist.models.config_models import AppConfig
from tasklist.models.storage_strategy import StorageStrategyContext
from tasklist.utils.logger import get_logger


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("tasklist"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("tasklist"))

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage, creating defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # Expected on first run
            self._config = AppConfig()
            self.save_config()
            get_logger().info("created default config at %s", self.config_path)
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dotted key.

        Raises:
            KeyError: If the key does not exist
        """
        return self.config.get(key)

    def set(self, key: str, value: Any) -> AppConfig:
        """Set a configuration value by dotted key and persist it.

        Raises:
            KeyError: If the key does not exist
            pydantic.ValidationError: If the value is invalid
        """
        self._config = self.config.with_value(key, value)
        self.save_config()
        get_logger().info("config %s set to %r", key, value)
        return self._config

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()
        return self._config

    def get_storage_context(self) -> StorageStrategyContext:
        """Build the storage strategy for the configured backend."""
        return StorageStrategyContext.from_config(self.config.storage)


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the cached ConfigService instance."""
    return ConfigService()
