"""Dependency injection container configuration."""

from __future__ import annotations

from pathlib import Path

import httpx
from dependency_injector import containers, providers

from clip_downloader.application.services.clip_service import DefaultClipService
from clip_downloader.domain.services.clip_downloader import ClipDownloader
from clip_downloader.domain.services.clip_repository import ClipRepository
from clip_downloader.domain.services.clip_service import ClipService
from clip_downloader.domain.services.configuration_provider import ConfigurationProvider
from clip_downloader.infrastructure.config.yaml_provider import YamlConfigurationProvider
from clip_downloader.infrastructure.download.http_downloader import HttpClipDownloader
from clip_downloader.infrastructure.storage.json_store import JsonClipStore, JsonCredentialStore
from clip_downloader.infrastructure.twitch.api_client import TwitchApiClient
from clip_downloader.infrastructure.twitch.auth_manager import TwitchAuthManager
from clip_downloader.infrastructure.twitch.clip_repository import TwitchClipRepository


class Container(containers.DeclarativeContainer):
    """
    Dependency injection container for the Clip Downloader application.

    Holds the configuration provider. Services that talk to the network are
    built by the getter functions below from an HTTP client owned by the
    caller, so the client's lifetime stays with the running event loop.
    """

    config = providers.Configuration()

    configuration_provider = providers.Singleton(
        YamlConfigurationProvider,
        config_path=config.config_path,
        state_file=config.state_file,
    )

    clip_store = providers.Singleton(JsonClipStore)


def create_container(config_path: str | Path, state_file: str | Path | None = None) -> Container:
    """
    Create and configure the dependency injection container.

    Args:
        config_path: Path to the configuration file
        state_file: Optional override for the credential state file

    Returns:
        Configured container instance
    """
    container = Container()
    container.config.from_dict({
        "config_path": str(config_path),
        "state_file": str(state_file) if state_file else None,
    })
    return container


def get_configuration_provider(container: Container) -> ConfigurationProvider:
    """Get the configuration provider from the container."""
    return container.configuration_provider()


def create_http_client(container: Container) -> httpx.AsyncClient:
    """Create the HTTP client shared by API calls and downloads."""
    config_provider = get_configuration_provider(container)
    return httpx.AsyncClient(
        headers={"User-Agent": config_provider.get_user_agent()},
        follow_redirects=True,
        timeout=httpx.Timeout(None),
    )


def get_credential_store(container: Container) -> JsonCredentialStore:
    """Get the credential store for the configured state file."""
    config_provider = get_configuration_provider(container)
    return JsonCredentialStore(config_provider.get_state_file())


def get_api_client(container: Container, http_client: httpx.AsyncClient) -> TwitchApiClient:
    """Get the Twitch API client."""
    config_provider = get_configuration_provider(container)
    return TwitchApiClient(http_client, timeout=config_provider.get_api_timeout())


def get_auth_manager(container: Container, http_client: httpx.AsyncClient) -> TwitchAuthManager:
    """Get the Twitch authentication manager."""
    config_provider = get_configuration_provider(container)
    return TwitchAuthManager(
        api_client=get_api_client(container, http_client),
        credential_store=get_credential_store(container),
        client_id=config_provider.get_client_id(),
        client_secret=config_provider.get_client_secret(),
    )


def get_clip_repository(container: Container, http_client: httpx.AsyncClient) -> ClipRepository:
    """Get the clip repository."""
    return TwitchClipRepository(get_api_client(container, http_client))


def get_clip_downloader(container: Container, http_client: httpx.AsyncClient) -> ClipDownloader:
    """Get the batch downloader."""
    config_provider = get_configuration_provider(container)
    return HttpClipDownloader(
        http_client,
        concurrency_limit=config_provider.get_concurrency_limit(),
        chunk_size=config_provider.get_chunk_size(),
        timeout=config_provider.get_download_timeout(),
    )


def get_clip_service(container: Container, http_client: httpx.AsyncClient) -> ClipService:
    """Get the main clip acquisition service."""
    return DefaultClipService(
        auth_manager=get_auth_manager(container, http_client),
        clip_repository=get_clip_repository(container, http_client),
        downloader=get_clip_downloader(container, http_client),
        credential_store=get_credential_store(container),
        clip_store=container.clip_store(),
        config_provider=get_configuration_provider(container),
    )
