"""Configuration service for managing SmartDash CLI configuration.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json (created with defaults on first run)
- Selecting the backend endpoint for the active environment
- Dotted-key updates validated through the pydantic models
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import get_args

from platformdirs import user_config_dir, user_data_dir
from pydantic import ValidationError as PydanticValidationError

from smartdash_cli.models.config_models import AppConfig, Environment

ENV_ENVIRONMENT = "SMARTDASH_ENV"
ENV_API_URL = "SMARTDASH_API_URL"


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("smartdash_cli"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("smartdash_cli"))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def local_storage_path(self) -> Path:
        """File backing the persistent key/value store (token, theme)."""
        return self.data_dir / "local_storage.json"

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self):
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))

            self.config_path.chmod(0o600)
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults."""
        if self.config_path.exists():
            self.config_path.unlink()
        self._config = AppConfig()
        self.save_config()
        return self._config

    @property
    def environment(self) -> str:
        """Active environment: SMARTDASH_ENV if set, else the configured one."""
        env = os.getenv(ENV_ENVIRONMENT)
        if env:
            if env not in get_args(Environment):
                raise ValueError(
                    f"{ENV_ENVIRONMENT} must be one of {', '.join(get_args(Environment))}, "
                    f"got '{env}'"
                )
            return env
        return self.config.environment

    def get_api_endpoint(self) -> str:
        """Get the backend base URL.

        Priority:
        1. SMARTDASH_API_URL environment variable
        2. Endpoint of the active environment (see ``environment``)
        """
        override = os.getenv(ENV_API_URL)
        if override:
            return override.rstrip("/")
        return self.config.endpoint_for(self.environment)  # type: ignore[arg-type]

    def set_value(self, key: str, value: str) -> AppConfig:
        """Set a dotted configuration key (e.g. ``api.timeout``) and save.

        Raises:
            ValueError: unknown key, or a value the models reject
        """
        data = self.config.model_dump()
        parts = key.split(".")
        node = data
        for part in parts[:-1]:
            if not isinstance(node.get(part), dict):
                raise ValueError(f"Unknown config key '{key}'")
            node = node[part]
        if parts[-1] not in node or isinstance(node[parts[-1]], dict):
            raise ValueError(f"Unknown config key '{key}'")
        node[parts[-1]] = value

        try:
            new_config = AppConfig.model_validate(data)
        except PydanticValidationError as e:
            reason = e.errors()[0]["msg"]
            raise ValueError(f"Invalid value for '{key}': {reason}") from e

        self._config = new_config
        self.save_config()
        return new_config


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
