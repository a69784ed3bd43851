"""YAML-based configuration provider implementation."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from clip_downloader.domain.exceptions import ConfigurationError
from clip_downloader.domain.services.configuration_provider import ConfigurationProvider
from clip_downloader.infrastructure.config.models import (
    DEFAULT_USER_AGENT,
    AppConfig,
    LoggingConfig,
)

DEFAULT_CONFIG_TEMPLATE: dict[str, Any] = {
    "twitch": {
        "client_id": "${TWITCH_CLIENT_ID}",
        "client_secret": "${TWITCH_CLIENT_SECRET}",
        "user_agent": DEFAULT_USER_AGENT,
    },
    "storage": {
        "state_file": "state.json",
        "clip_info_dir": "clip_info",
        "download_dir": "clips",
    },
    "download": {
        "concurrency_limit": 10,
        "chunk_size_bytes": 65536,
    },
    "logging": {
        "level": "INFO",
        "file_path": None,
    },
}

_ENV_VAR_PATTERN = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')


def write_default_config(config_path: str | Path) -> Path:
    """
    Write a configuration template for the user to fill in.

    Args:
        config_path: Where to write the template

    Returns:
        The path that was written

    Raises:
        ConfigurationError: If the template cannot be written
    """
    path = Path(config_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(DEFAULT_CONFIG_TEMPLATE, f, sort_keys=False)
    except OSError as e:
        raise ConfigurationError(f"Could not create config file {path}: {e}", e) from e
    return path


class YamlConfigurationProvider(ConfigurationProvider):
    """
    Configuration provider that loads settings from YAML files.

    JSON configuration files are accepted as well since JSON is valid YAML.
    Values support ${VAR_NAME} and ${VAR_NAME:default} environment substitution.
    """

    def __init__(self, config_path: str | Path, state_file: str | Path | None = None) -> None:
        """
        Initialize the YAML configuration provider.

        Args:
            config_path: Path to the YAML configuration file
            state_file: Overrides ``storage.state_file`` when given

        Raises:
            ConfigurationError: If the configuration file cannot be loaded or is invalid
        """
        self.config_path = Path(config_path)
        self.state_file_override = Path(state_file) if state_file else None
        self._config: AppConfig | None = None
        self._load_config()

    def _load_config(self) -> None:
        """Load and validate configuration from YAML file."""
        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML configuration: {e}", e) from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file: {e}", e) from e

        if not raw_config:
            raise ConfigurationError("Configuration file is empty")
        if not isinstance(raw_config, dict):
            raise ConfigurationError("Configuration file must contain a mapping")

        raw_config = self._substitute_env_vars(raw_config)

        try:
            self._config = AppConfig(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}", e) from e

    def _substitute_env_vars(self, obj: Any) -> Any:
        """Recursively substitute environment variables in configuration."""
        if isinstance(obj, dict):
            return {key: self._substitute_env_vars(value) for key, value in obj.items()}
        elif isinstance(obj, list):
            return [self._substitute_env_vars(item) for item in obj]
        elif isinstance(obj, str):
            return self._substitute_string_env_vars(obj)
        else:
            return obj

    def _substitute_string_env_vars(self, value: str) -> str:
        """Substitute environment variables in a string value."""

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.getenv(var_name, default_value)

        return _ENV_VAR_PATTERN.sub(replace_var, value)

    @property
    def config(self) -> AppConfig:
        """Get the loaded configuration."""
        if self._config is None:
            raise ConfigurationError("Configuration not loaded")
        return self._config

    def get_client_id(self) -> str:
        return self.config.twitch.client_id

    def get_client_secret(self) -> str:
        return self.config.twitch.client_secret

    def get_user_agent(self) -> str:
        return self.config.twitch.user_agent

    def get_api_timeout(self) -> float | None:
        return self.config.twitch.request_timeout_seconds

    def get_state_file(self) -> Path:
        """Get the credential state path, honouring the command-line override."""
        if self.state_file_override is not None:
            return self.state_file_override
        return Path(self.config.storage.state_file)

    def get_clip_info_dir(self) -> Path:
        return Path(self.config.storage.clip_info_dir)

    def get_download_dir(self) -> Path:
        return Path(self.config.storage.download_dir)

    def get_concurrency_limit(self) -> int:
        return self.config.download.concurrency_limit

    def get_chunk_size(self) -> int:
        return self.config.download.chunk_size_bytes

    def get_download_timeout(self) -> float | None:
        return self.config.download.request_timeout_seconds

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.config.logging
