"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Iterator
from unittest.mock import Mock

import httpx
import pytest
import yaml

from clip_downloader.domain.models.clip import ClipCollection, ClipInfo
from clip_downloader.domain.models.credential import Credential
from clip_downloader.infrastructure.config.models import AppConfig
from clip_downloader.infrastructure.twitch.api_client import TwitchApiClient

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_clip_item(index: int, offset: int | None = None) -> dict[str, Any]:
    """Build a Helix clip listing entry."""
    offset_part = f"-offset-{offset}" if offset is not None else ""
    return {
        "id": f"Clip{index}",
        "url": f"https://clips.twitch.tv/Clip{index}",
        "broadcaster_id": "1234",
        "creator_name": f"viewer{index}",
        "title": f"Great play {index}",
        "created_at": f"2024-04-{(index % 28) + 1:02d}T18:00:00Z",
        "thumbnail_url": (
            f"https://clips-media-assets2.twitch.tv/AT-cm%7C{index}{offset_part}-preview-480x272.jpg"
        ),
    }


class TwitchStub:
    """
    In-memory stand-in for the Twitch identity provider and Helix API.

    ``pages`` entries are either ``{"items": [...], "cursor": str | None}``,
    an HTTP status code to reject with, or ``"unreachable"``.
    """

    def __init__(self) -> None:
        self.users: list[dict[str, Any]] = [{"id": "1234", "login": "streamer"}]
        self.users_status = 200
        self.pages: list[Any] = []
        self.token_status = 200
        self.token_body: Any = {
            "access_token": "fresh-token",
            "expires_in": 3600,
            "token_type": "bearer",
        }
        self.token_unreachable = False
        self.requests: list[httpx.Request] = []

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.host == "id.twitch.tv":
            if self.token_unreachable:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(self.token_status, json=self.token_body)

        if request.url.path == "/helix/users":
            if self.users_status != 200:
                return httpx.Response(
                    self.users_status,
                    json={"error": "Unauthorized", "status": self.users_status, "message": "Invalid OAuth token"},
                )
            return httpx.Response(200, json={"data": self.users})

        if request.url.path == "/helix/clips":
            index = len(self.requests_to("/helix/clips")) - 1
            page = self.pages[index]
            if page == "unreachable":
                raise httpx.ConnectError("connection reset", request=request)
            if isinstance(page, int):
                return httpx.Response(page, json={"error": "Server Error", "status": page, "message": "boom"})
            pagination = {"cursor": page["cursor"]} if page.get("cursor") else {}
            return httpx.Response(200, json={"data": page["items"], "pagination": pagination})

        return httpx.Response(404, json={"error": "Not Found", "status": 404, "message": "no route"})


@pytest.fixture
def twitch_stub() -> TwitchStub:
    """Create a Twitch API stub with a single matching user."""
    return TwitchStub()


@pytest.fixture
def api_client(twitch_stub: TwitchStub) -> TwitchApiClient:
    """Create an API client that talks to the stub."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(twitch_stub.handler))
    return TwitchApiClient(http_client)


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Sample configuration data for testing."""
    return {
        "twitch": {
            "client_id": "test-client-id",
            "client_secret": "test-client-secret",
            "user_agent": "TWITCH_CLIP_DOWNLOADER/0.1",
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
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "file_path": None,
            "max_file_size": 10485760,
            "backup_count": 5,
        },
    }


@pytest.fixture
def temp_config_file(sample_config_data: dict[str, Any], tmp_path: Path) -> Path:
    """Create a temporary configuration file whose storage lives under tmp_path."""
    data = dict(sample_config_data)
    data["storage"] = {
        "state_file": str(tmp_path / "state.json"),
        "clip_info_dir": str(tmp_path / "clip_info"),
        "download_dir": str(tmp_path / "clips"),
    }
    path = tmp_path / "config.yml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def app_config(sample_config_data: dict[str, Any]) -> AppConfig:
    """Create an AppConfig instance for testing."""
    return AppConfig(**sample_config_data)


@pytest.fixture
def valid_credential() -> Credential:
    """Credential that expires one hour after FIXED_NOW."""
    return Credential(token="stored-token", expires_at=FIXED_NOW + timedelta(hours=1))


@pytest.fixture
def expired_credential() -> Credential:
    """Credential that expired one hour before FIXED_NOW."""
    return Credential(token="stale-token", expires_at=FIXED_NOW - timedelta(hours=1))


@pytest.fixture
def sample_clips() -> ClipCollection:
    """Create an unresolved clip collection."""
    collection = ClipCollection()
    collection.extend_from_api(make_clip_item(i) for i in range(3))
    return collection


@pytest.fixture
def sample_clip() -> ClipInfo:
    """Create a single unresolved clip."""
    return ClipInfo.from_api_item(make_clip_item(7, offset=42))


@pytest.fixture
def mock_config_provider(app_config: AppConfig, tmp_path: Path) -> Mock:
    """Create a mock configuration provider rooted in tmp_path."""
    mock = Mock()
    mock.get_client_id.return_value = app_config.twitch.client_id
    mock.get_client_secret.return_value = app_config.twitch.client_secret
    mock.get_user_agent.return_value = app_config.twitch.user_agent
    mock.get_api_timeout.return_value = None
    mock.get_state_file.return_value = tmp_path / "state.json"
    mock.get_clip_info_dir.return_value = tmp_path / "clip_info"
    mock.get_download_dir.return_value = tmp_path / "clips"
    mock.get_concurrency_limit.return_value = app_config.download.concurrency_limit
    mock.get_chunk_size.return_value = app_config.download.chunk_size_bytes
    mock.get_download_timeout.return_value = None
    mock.get_logging_config.return_value = app_config.logging
    return mock


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Restore the root logger's handlers and level after the test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
