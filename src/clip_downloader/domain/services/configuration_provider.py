"""Abstract base class for configuration management."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional


class ConfigurationProvider(ABC):
    """
    Abstract service for providing application configuration.

    This interface defines the contract for loading and validating
    configuration data from various sources (files, environment variables).
    """

    @abstractmethod
    def get_client_id(self) -> str:
        """
        Get the Twitch application client ID.

        Raises:
            ConfigurationError: If configuration is invalid or cannot be loaded
        """
        pass

    @abstractmethod
    def get_client_secret(self) -> str:
        """
        Get the Twitch application client secret.

        Raises:
            ConfigurationError: If configuration is invalid or cannot be loaded
        """
        pass

    @abstractmethod
    def get_user_agent(self) -> str:
        """Get the User-Agent sent with every request."""
        pass

    @abstractmethod
    def get_api_timeout(self) -> Optional[float]:
        """
        Get the timeout for Twitch API requests.

        Returns:
            Timeout in seconds, or None to wait indefinitely
        """
        pass

    @abstractmethod
    def get_state_file(self) -> Path:
        """Get the path of the persisted credential state."""
        pass

    @abstractmethod
    def get_clip_info_dir(self) -> Path:
        """Get the directory where clip info files are stored by default."""
        pass

    @abstractmethod
    def get_download_dir(self) -> Path:
        """Get the root directory for downloaded clips."""
        pass

    @abstractmethod
    def get_concurrency_limit(self) -> int:
        """
        Get the maximum number of downloads in flight at once.

        Returns:
            Size of each download chunk (typically 10)
        """
        pass

    @abstractmethod
    def get_chunk_size(self) -> int:
        """Get the number of bytes read from a response body per write."""
        pass

    @abstractmethod
    def get_download_timeout(self) -> Optional[float]:
        """
        Get the timeout for media downloads.

        Returns:
            Timeout in seconds, or None to wait indefinitely
        """
        pass

    @abstractmethod
    def get_logging_config(self) -> Any:
        """
        Get logging configuration.

        Returns:
            Logging settings (level, format, file handler options)
        """
        pass
