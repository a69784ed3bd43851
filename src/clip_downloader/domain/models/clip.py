"""Clip domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


@dataclass(frozen=True)
class ClipInfo:
    """
    Metadata for a single Twitch clip.

    ``video_url`` stays empty until download links have been created for the
    owning collection. It only depends on ``thumbnail_url``.
    """

    title: str
    creator_name: str
    created_at: str
    thumbnail_url: str
    video_url: str | None = None

    @classmethod
    def from_api_item(cls, item: dict[str, Any]) -> ClipInfo:
        """Build a clip from a Helix clip listing entry."""
        return cls(
            title=item["title"],
            creator_name=item["creator_name"],
            created_at=item["created_at"],
            thumbnail_url=item["thumbnail_url"],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted representation."""
        return {
            "title": self.title,
            "creator_name": self.creator_name,
            "created_at": self.created_at,
            "thumbnail_url": self.thumbnail_url,
            "video_url": self.video_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClipInfo:
        """Parse the persisted representation."""
        return cls(
            title=data["title"],
            creator_name=data["creator_name"],
            created_at=data["created_at"],
            thumbnail_url=data["thumbnail_url"],
            video_url=data.get("video_url"),
        )

    def __str__(self) -> str:
        return f"ClipInfo(title='{self.title[:50]}', created_at={self.created_at})"


@dataclass
class ClipCollection:
    """
    Ordered clips of one broadcaster.

    ``truncated`` is set when the listing stopped on a failed page, so the
    collection may be missing clips. It is not persisted.
    """

    clips: list[ClipInfo] = field(default_factory=list)
    truncated: bool = field(default=False, compare=False)

    def extend_from_api(self, items: Iterable[dict[str, Any]]) -> None:
        """Append listing entries in upstream order."""
        self.clips.extend(ClipInfo.from_api_item(item) for item in items)

    @property
    def has_video_urls(self) -> bool:
        """Whether at least one clip carries a download link."""
        return any(clip.video_url is not None for clip in self.clips)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted representation."""
        return {"clips": [clip.to_dict() for clip in self.clips]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClipCollection:
        """Parse the persisted representation."""
        return cls(clips=[ClipInfo.from_dict(item) for item in data.get("clips", [])])

    def __len__(self) -> int:
        return len(self.clips)

    def __iter__(self) -> Iterator[ClipInfo]:
        return iter(self.clips)
