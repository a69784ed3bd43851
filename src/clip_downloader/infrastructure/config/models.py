"""Pydantic configuration models for application settings."""

from __future__ import annotations

from pydantic import BaseModel, Field, validator

DEFAULT_USER_AGENT = "TWITCH_CLIP_DOWNLOADER/0.1"


class TwitchAPIConfig(BaseModel):
    """Credentials and request settings for the Twitch API."""

    client_id: str = Field(..., min_length=1, description="Twitch application client ID")
    client_secret: str = Field(..., min_length=1, description="Twitch application client secret")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1, description="User-Agent header")
    request_timeout_seconds: float | None = Field(
        default=None, gt=0, description="Timeout for API requests (None waits indefinitely)"
    )

    @validator("client_id", "client_secret")
    def validate_not_blank(cls, v: str) -> str:
        """Reject values that are only whitespace."""
        if not v.strip():
            raise ValueError("Value cannot be blank")
        return v.strip()

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class StorageSettings(BaseModel):
    """Locations of persisted state and downloaded files."""

    state_file: str = Field(default="state.json", description="Credential state file")
    clip_info_dir: str = Field(default="clip_info", description="Directory for clip info files")
    download_dir: str = Field(default="clips", description="Root directory for downloaded clips")

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class DownloadSettings(BaseModel):
    """Configuration for the batch downloader."""

    concurrency_limit: int = Field(default=10, ge=1, le=100, description="Downloads in flight per chunk")
    chunk_size_bytes: int = Field(default=65536, ge=1024, description="Bytes read per write")
    request_timeout_seconds: float | None = Field(
        default=None, gt=0, description="Timeout for each download (None waits indefinitely)"
    )

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string for the log file"
    )
    file_path: str | None = Field(default=None, description="Log file path (None for console only)")
    max_file_size: int = Field(default=10485760, ge=1024, description="Max log file size in bytes (10MB)")
    backup_count: int = Field(default=5, ge=1, description="Number of backup log files to keep")

    @validator("level")
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class AppConfig(BaseModel):
    """
    Main application configuration model.

    This is the root configuration object that contains all application settings,
    validated using Pydantic for type safety and runtime validation.
    """

    twitch: TwitchAPIConfig
    storage: StorageSettings = Field(default_factory=StorageSettings)
    download: DownloadSettings = Field(default_factory=DownloadSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    class Config:
        """Pydantic configuration."""
        extra = "forbid"
        validate_assignment = True
