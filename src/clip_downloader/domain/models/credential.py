"""Credential domain model for the app access token."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class PaginationDirection(str, Enum):
    """Direction of a stored pagination cursor."""

    FORWARDS = "Forwards"
    BACKWARDS = "Backwards"


@dataclass(frozen=True)
class Pagination:
    """
    Stored pagination cursor.

    Reserved slot in the state file, written back exactly as it was read.
    No operation reads or writes it.
    """

    direction: PaginationDirection
    cursor: str

    def to_dict(self) -> dict[str, str]:
        """Convert to the persisted tagged representation."""
        return {"type": self.direction.value, "cursor": self.cursor}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pagination:
        """Parse the persisted tagged representation."""
        return cls(direction=PaginationDirection(data["type"]), cursor=str(data["cursor"]))


@dataclass(frozen=True)
class Credential:
    """
    Bearer token together with its absolute expiry instant.

    A credential without a token is always expired, whatever ``expires_at`` says.
    """

    token: str | None = None
    expires_at: datetime | None = None
    pagination: Pagination | None = field(default=None, compare=False)

    def is_valid(self, now: datetime) -> bool:
        """Whether the token can still be used at ``now``."""
        if not self.token or self.expires_at is None:
            return False
        return self.expires_at > now

    def time_remaining(self, now: datetime) -> timedelta:
        """Time left before the token expires (zero when already expired)."""
        if self.is_valid(now) and self.expires_at is not None:
            return self.expires_at - now
        return timedelta(0)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted state representation."""
        return {
            "token": self.token,
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
            "pagination": self.pagination.to_dict() if self.pagination else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Credential:
        """
        Parse the persisted state representation.

        An expiry written without a UTC offset is read as UTC.
        """
        expires_at = data.get("expires_at")
        pagination = data.get("pagination")
        return cls(
            token=data.get("token"),
            expires_at=_as_utc(datetime.fromisoformat(expires_at)) if expires_at else None,
            pagination=Pagination.from_dict(pagination) if pagination else None,
        )

    def __repr__(self) -> str:
        """Developer-friendly representation that never leaks the token."""
        token = "<set>" if self.token else None
        return f"Credential(token={token}, expires_at={self.expires_at})"
