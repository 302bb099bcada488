"""
Channel Feed Builder
Chains profile fetch -> channel resolution -> upload listing -> item transform.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from shared.cache import CacheManager

from ..config.app_config import AppConfig
from ..youtube import item_transformer
from ..youtube.channel_ref import ChannelId, ChannelRef, parse_channel_ref
from ..youtube.channel_resolver import ChannelResolver
from ..youtube.models import FeedItem, UploadEntry
from ..youtube.page_fetcher import ProfilePageFetcher
from ..youtube.upload_lister import UploadLister
from ..youtube.youtube_client import YouTubeDataClient

logger = logging.getLogger(__name__)


@dataclass
class ChannelFeed:
    """Feed object handed to the serialization layer."""
    title: str
    link: str
    logo: Optional[str] = None
    description: Optional[str] = None
    items: List[FeedItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "link": self.link,
            "logo": self.logo,
            "description": self.description,
            "item": [item.to_dict() for item in self.items],
        }


class ChannelFeedBuilder:
    """
    Builds a ChannelFeed for one channel reference.

    Each step depends on the previous one, so the steps run one after the other.
    """

    def __init__(
        self,
        page_fetcher: ProfilePageFetcher,
        resolver: ChannelResolver,
        lister: UploadLister,
        embed_enabled: bool = True
    ):
        self._page_fetcher = page_fetcher
        self._resolver = resolver
        self._lister = lister
        self._embed_enabled = embed_enabled

    @classmethod
    def from_config(cls, config: AppConfig, cache: Optional[CacheManager] = None) -> "ChannelFeedBuilder":
        """Wires the default collaborators. Raises ConfigurationMissingError without an API key."""
        youtube_client = YouTubeDataClient(config.api_key)
        cache = cache if cache is not None else CacheManager(config.cache_ttl_seconds)
        return cls(
            page_fetcher=ProfilePageFetcher(config.request_timeout, config.user_agent),
            resolver=ChannelResolver(youtube_client, cache),
            lister=UploadLister(youtube_client, cache),
            embed_enabled=config.embed_videos
        )

    async def build_for_channel_id(self, raw_id: str, embed: Optional[bool] = None) -> ChannelFeed:
        """Entry point for channel ids. A malformed id fails before any request."""
        return await self.build(ChannelId(raw_id.strip() if isinstance(raw_id, str) else raw_id), embed)

    async def build_for_user(self, raw_name: str, embed: Optional[bool] = None) -> ChannelFeed:
        """Entry point for legacy usernames and @handles."""
        return await self.build(parse_channel_ref(raw_name), embed)

    async def build(self, ref: ChannelRef, embed: Optional[bool] = None) -> ChannelFeed:
        embed_enabled = self._embed_enabled if embed is None else embed

        page = await self._page_fetcher.fetch_page(ref.page_url)
        metadata = await self._resolver.resolve(ref, page)
        entries = await self._lister.list_uploads(metadata.uploads_playlist_id)
        items = item_transformer.transform(entries, embed_enabled)

        logger.info(f"Built feed for {ref.canonical_link}: {len(items)} items ({len(entries) - len(items)} hidden)")

        return ChannelFeed(
            title=f"{self._feed_title(ref, metadata.title, entries)} - YouTube",
            link=metadata.canonical_link,
            logo=metadata.logo_url,
            description=metadata.description,
            items=items
        )

    @staticmethod
    def _feed_title(ref: ChannelRef, resolved_title: str, entries: List[UploadEntry]) -> str:
        # The playlist owner's title is authoritative when the caller only gave an id
        if isinstance(ref, ChannelId) and entries and entries[0].channel_title:
            return entries[0].channel_title
        return resolved_title
