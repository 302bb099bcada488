"""
Upload and Feed Item Domain Models
"""

from dataclasses import dataclass, asdict, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Thumbnail:
    """One thumbnail variant as returned by the Data API (default, medium, high, ...)."""
    name: str
    url: str
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class UploadEntry:
    """
    Raw playlist item snippet, read-only.

    `channel_title` is the playlist owner; `owner_channel_title` is the
    uploader of the video itself and may differ.
    """
    title: str
    video_id: str
    channel_title: str = ""
    owner_channel_title: str = ""
    thumbnails: Tuple[Thumbnail, ...] = ()
    description: str = ""
    published_at: Optional[str] = None
    duration: Optional[str] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "UploadEntry":
        """Builds an entry from one playlistItems.list item. Missing fields get defaults."""
        snippet = item.get("snippet", {}) or {}
        resource = snippet.get("resourceId", {}) or {}
        thumbnails = tuple(
            Thumbnail(
                name=name,
                url=thumb.get("url", ""),
                width=int(thumb.get("width", 0) or 0),
                height=int(thumb.get("height", 0) or 0)
            )
            for name, thumb in (snippet.get("thumbnails", {}) or {}).items()
            if isinstance(thumb, dict) and thumb.get("url")
        )
        return cls(
            title=snippet.get("title", ""),
            video_id=resource.get("videoId", ""),
            channel_title=snippet.get("channelTitle", ""),
            owner_channel_title=snippet.get("videoOwnerChannelTitle", ""),
            thumbnails=thumbnails,
            description=snippet.get("description", "") or "",
            published_at=snippet.get("publishedAt"),
            duration=snippet.get("duration")
        )


@dataclass(frozen=True)
class FeedItemExtra:
    intro: str
    duration: Optional[str]
    embed_url: str


@dataclass(frozen=True)
class FeedItem:
    """
    Normalized feed item derived from one UploadEntry.
    Immutable dataclass; items share no state.
    """
    title: str
    cover_url: Optional[str]
    description_html: str
    published_at: Optional[datetime]
    link: str
    author: str
    extra: FeedItemExtra = field(default_factory=lambda: FeedItemExtra("", None, ""))

    def to_dict(self) -> Dict[str, Any]:
        """Convert object to dictionary for serialization (e.g., JSON)."""
        data = asdict(self)
        data["published_at"] = self.published_at.isoformat() if self.published_at else None
        return data
