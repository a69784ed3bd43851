"""Integration tests for dependency injection container."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from clip_downloader.application.services.clip_service import DefaultClipService
from clip_downloader.domain.exceptions import ConfigurationError
from clip_downloader.infrastructure.container import (
    Container,
    create_container,
    create_http_client,
    get_auth_manager,
    get_clip_downloader,
    get_clip_service,
    get_configuration_provider,
    get_credential_store,
)
from clip_downloader.infrastructure.download.http_downloader import HttpClipDownloader


class TestContainerIntegration:
    """Integration tests for the dependency injection container."""

    def test_create_container_success(self, temp_config_file: Path) -> None:
        """Test successful container creation."""
        container = create_container(temp_config_file)
        assert isinstance(container, Container)

    def test_invalid_config_fails_on_first_use(self, tmp_path: Path) -> None:
        """Test that a missing config surfaces when the provider is built."""
        container = create_container(tmp_path / "nonexistent.yml")
        with pytest.raises(ConfigurationError):
            get_configuration_provider(container)

    def test_get_configuration_provider(self, temp_config_file: Path) -> None:
        """Test getting configuration provider from container."""
        container = create_container(temp_config_file)
        config_provider = get_configuration_provider(container)

        assert config_provider.get_client_id() == "test-client-id"
        assert config_provider is get_configuration_provider(container)

    def test_state_file_override(self, temp_config_file: Path, tmp_path: Path) -> None:
        """Test that the state override reaches the credential store."""
        container = create_container(temp_config_file, tmp_path / "override.json")
        assert get_credential_store(container).state_file == tmp_path / "override.json"

    @pytest.mark.asyncio
    async def test_http_client_user_agent(self, temp_config_file: Path) -> None:
        """Test that the shared client identifies the application."""
        container = create_container(temp_config_file)
        async with create_http_client(container) as http_client:
            assert http_client.headers["User-Agent"] == "TWITCH_CLIP_DOWNLOADER/0.1"

    @pytest.mark.asyncio
    async def test_service_wiring(self, temp_config_file: Path) -> None:
        """Test that configured values flow into the services."""
        container = create_container(temp_config_file)
        async with httpx.AsyncClient() as http_client:
            auth_manager = get_auth_manager(container, http_client)
            downloader = get_clip_downloader(container, http_client)
            service = get_clip_service(container, http_client)

        assert auth_manager.client_id == "test-client-id"
        assert auth_manager.client_secret == "test-client-secret"
        assert isinstance(downloader, HttpClipDownloader)
        assert downloader.concurrency_limit == 10
        assert isinstance(service, DefaultClipService)
        assert service.clip_store is container.clip_store()
