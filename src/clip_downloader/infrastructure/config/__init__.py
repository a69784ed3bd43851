"""Configuration providers and models."""

from clip_downloader.infrastructure.config.models import AppConfig, TwitchAPIConfig
from clip_downloader.infrastructure.config.yaml_provider import (
    YamlConfigurationProvider,
    write_default_config,
)

__all__ = [
    "AppConfig",
    "TwitchAPIConfig",
    "YamlConfigurationProvider",
    "write_default_config",
]
