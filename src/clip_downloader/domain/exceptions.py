"""Domain-specific exceptions for the Clip Downloader application."""

from typing import Any, Optional


class ClipDownloaderError(Exception):
    """Base exception for all Clip Downloader errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(ClipDownloaderError):
    """Raised when there are configuration-related errors."""

    pass


class AuthenticationError(ClipDownloaderError):
    """Raised when the client-credentials token exchange fails."""

    def __init__(
        self,
        message: str,
        payload: Optional[Any] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause)
        self.payload = payload


class APIError(ClipDownloaderError):
    """Raised when Twitch API calls are rejected or get no response."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Optional[Any] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause)
        self.status_code = status_code
        self.payload = payload


class UserNotFoundError(ClipDownloaderError):
    """Raised when a user name does not resolve to any Twitch account."""

    def __init__(self, user_name: str, cause: Optional[Exception] = None) -> None:
        message = f"No user found by that name: {user_name}"
        super().__init__(message, cause)
        self.user_name = user_name


class StorageError(ClipDownloaderError):
    """Raised when a persisted artifact cannot be read or written."""

    def __init__(self, path: str, reason: str, cause: Optional[Exception] = None) -> None:
        message = f"{reason}: {path}"
        super().__init__(message, cause)
        self.path = path
        self.reason = reason


class ValidationError(ClipDownloaderError):
    """Raised when data validation fails."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        message = f"Validation failed for {field}='{value}': {reason}"
        super().__init__(message)
        self.field = field
        self.value = value
        self.reason = reason
