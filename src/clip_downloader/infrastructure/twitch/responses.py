"""Outcomes of Twitch API requests.

Every request resolves to exactly one of three cases: the decoded payload,
a structured rejection from the server, or no usable response at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class ApiSuccess(Generic[T]):
    """The server accepted the request."""

    data: T


@dataclass(frozen=True)
class ApiRejection:
    """The server answered with an error status."""

    status_code: int
    payload: Any

    @property
    def message(self) -> str:
        if isinstance(self.payload, dict) and self.payload.get("message"):
            return str(self.payload["message"])
        return f"HTTP {self.status_code}"


@dataclass(frozen=True)
class NoResponse:
    """The request never produced a usable response."""

    reason: str


ApiResponse = Union[ApiSuccess[T], ApiRejection, NoResponse]


@dataclass(frozen=True)
class TokenGrant:
    """Access token issued by the client-credentials exchange."""

    access_token: str
    expires_in: int
    token_type: str = "bearer"


@dataclass(frozen=True)
class UserLookup:
    """Accounts matching a login name, in upstream order."""

    users: list[dict[str, Any]]


@dataclass(frozen=True)
class ClipsPage:
    """One page of the clip listing."""

    items: list[dict[str, Any]]
    cursor: str | None = None
