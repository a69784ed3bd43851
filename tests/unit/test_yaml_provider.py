"""Tests for YAML configuration provider."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from clip_downloader.domain.exceptions import ConfigurationError
from clip_downloader.infrastructure.config.yaml_provider import (
    YamlConfigurationProvider,
    write_default_config,
)


class TestYamlConfigurationProvider:
    """Tests for YamlConfigurationProvider."""

    def test_yaml_provider_creation(self, temp_config_file: Path) -> None:
        """Test YAML provider creation with valid config file."""
        provider = YamlConfigurationProvider(temp_config_file)
        assert provider.config_path == temp_config_file
        assert provider._config is not None

    def test_yaml_provider_nonexistent_file(self, tmp_path: Path) -> None:
        """Test YAML provider with nonexistent config file."""
        with pytest.raises(ConfigurationError, match="Configuration file not found"):
            YamlConfigurationProvider(tmp_path / "nonexistent.yml")

    def test_yaml_provider_invalid_yaml(self, tmp_path: Path) -> None:
        """Test YAML provider with invalid YAML file."""
        path = tmp_path / "bad.yml"
        path.write_text("invalid: yaml: content: [")

        with pytest.raises(ConfigurationError, match="Failed to parse YAML"):
            YamlConfigurationProvider(path)

    def test_yaml_provider_empty_file(self, tmp_path: Path) -> None:
        """Test YAML provider with empty config file."""
        path = tmp_path / "empty.yml"
        path.write_text("")

        with pytest.raises(ConfigurationError, match="Configuration file is empty"):
            YamlConfigurationProvider(path)

    def test_yaml_provider_missing_credentials(self, tmp_path: Path) -> None:
        """Test YAML provider with a config lacking the client secret."""
        path = tmp_path / "config.yml"
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump({"twitch": {"client_id": "id"}}, f)

        with pytest.raises(ConfigurationError, match="Configuration validation failed"):
            YamlConfigurationProvider(path)

    def test_json_config_accepted(self, sample_config_data: dict[str, Any], tmp_path: Path) -> None:
        """Test that a JSON config file loads as well."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps(sample_config_data))

        provider = YamlConfigurationProvider(path)
        assert provider.get_client_id() == "test-client-id"

    def test_getters(self, temp_config_file: Path, tmp_path: Path) -> None:
        """Test typed accessors."""
        provider = YamlConfigurationProvider(temp_config_file)

        assert provider.get_client_id() == "test-client-id"
        assert provider.get_client_secret() == "test-client-secret"
        assert provider.get_user_agent() == "TWITCH_CLIP_DOWNLOADER/0.1"
        assert provider.get_api_timeout() is None
        assert provider.get_state_file() == tmp_path / "state.json"
        assert provider.get_clip_info_dir() == tmp_path / "clip_info"
        assert provider.get_download_dir() == tmp_path / "clips"
        assert provider.get_concurrency_limit() == 10
        assert provider.get_chunk_size() == 65536
        assert provider.get_download_timeout() is None
        assert provider.get_logging_config().level == "INFO"

    def test_state_file_override(self, temp_config_file: Path, tmp_path: Path) -> None:
        """Test that an explicit state file wins over the configured one."""
        provider = YamlConfigurationProvider(temp_config_file, state_file=tmp_path / "other.json")
        assert provider.get_state_file() == tmp_path / "other.json"

    def test_env_var_substitution(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test ${VAR} and ${VAR:default} substitution."""
        monkeypatch.setenv("TEST_TWITCH_SECRET", "from-env")
        monkeypatch.delenv("TEST_TWITCH_MISSING", raising=False)
        path = tmp_path / "config.yml"
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump({
                "twitch": {
                    "client_id": "${TEST_TWITCH_MISSING:fallback-id}",
                    "client_secret": "${TEST_TWITCH_SECRET}",
                },
            }, f)

        provider = YamlConfigurationProvider(path)
        assert provider.get_client_id() == "fallback-id"
        assert provider.get_client_secret() == "from-env"


class TestWriteDefaultConfig:
    """Tests for the first-run config template."""

    def test_template_written(self, tmp_path: Path) -> None:
        """Test the template is created with placeholders."""
        path = write_default_config(tmp_path / "nested" / "config.yml")

        data = yaml.safe_load(path.read_text())
        assert data["twitch"]["client_id"] == "${TWITCH_CLIENT_ID}"
        assert data["download"]["concurrency_limit"] == 10

    def test_template_needs_filling_in(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that an untouched template does not validate."""
        monkeypatch.delenv("TWITCH_CLIENT_ID", raising=False)
        monkeypatch.delenv("TWITCH_CLIENT_SECRET", raising=False)
        path = write_default_config(tmp_path / "config.yml")

        with pytest.raises(ConfigurationError, match="Configuration validation failed"):
            YamlConfigurationProvider(path)
