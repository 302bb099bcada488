"""
Channel Metadata Domain Model
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ChannelMetadata:
    """
    Domain model representing a resolved YouTube channel.
    Represents a VALID channel state only: `uploads_playlist_id` is never empty.
    """
    title: str
    canonical_link: str
    uploads_playlist_id: str
    logo_url: Optional[str] = None
    description: Optional[str] = None
    channel_id: Optional[str] = None

    def __repr__(self) -> str:
        return f"ChannelMetadata(title={self.title!r}, link={self.canonical_link!r}, uploads={self.uploads_playlist_id!r})"
