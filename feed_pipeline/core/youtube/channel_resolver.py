"""
Channel Resolver
Resolves a ChannelRef plus its scraped profile page into ChannelMetadata.
"""

import logging
from typing import Any, Dict, Optional

from shared.cache import CacheManager, cache_key, read_through

from .channel_info import ChannelMetadata
from .channel_ref import ChannelId, ChannelRef, Handle, Username, is_channel_id
from .page_fetcher import ProfilePage
from .youtube_client import YouTubeDataClient
from ..errors import ChannelNotFoundError

logger = logging.getLogger(__name__)

CHANNEL_PART = "contentDetails"


class ChannelResolver:
    """
    Resolves channel identifiers into canonical metadata and the uploads playlist.

    Resolution rules:
    - id: one channel lookup by id.
    - handle: use the channel id from the page's identity meta-tag when it is
      well-formed, otherwise look the name up as a legacy username.
    - username: one channel lookup by legacy username.

    Id lookups share one cache entry per channel id, so a handle and an id that
    name the same channel hit the same cached response.
    """

    def __init__(self, youtube_client: YouTubeDataClient, cache: CacheManager):
        self._client = youtube_client
        self._cache = cache

    async def resolve(self, ref: ChannelRef, page: ProfilePage) -> ChannelMetadata:
        logger.info(f"Resolving {ref.kind}: {ref.value}")

        page_channel_id = page.get_meta(itemprop="identifier")
        page_name = page.get_meta(itemprop="name")

        if isinstance(ref, ChannelId):
            channel_id = ref.value
            response = await self._lookup_by_id(channel_id)
        elif isinstance(ref, Handle):
            if is_channel_id(page_channel_id):
                channel_id = page_channel_id
                response = await self._lookup_by_id(channel_id)
            else:
                logger.warning(f"No channel id on the page of @{ref.value}, falling back to username lookup")
                channel_id = None
                response = await self._lookup_by_username(ref.value)
        elif isinstance(ref, Username):
            channel_id = None
            response = await self._lookup_by_username(ref.value)
        else:
            raise TypeError(f"Unsupported channel reference: {ref!r}")

        item = self._first_item(response, ref)
        uploads_playlist_id = (
            (item.get("contentDetails", {}) or {}).get("relatedPlaylists", {}) or {}
        ).get("uploads")
        if not uploads_playlist_id:
            raise ChannelNotFoundError(f"Channel {ref.value!r} has no public uploads playlist")

        metadata = ChannelMetadata(
            title=page_name or page.get_meta(property="og:title") or ref.value,
            canonical_link=ref.canonical_link,
            uploads_playlist_id=uploads_playlist_id,
            logo_url=page.get_meta(property="og:image"),
            description=page.get_meta(property="og:description"),
            channel_id=item.get("id") or channel_id
        )
        logger.info(f"Resolved {ref.value!r} -> uploads playlist {uploads_playlist_id}")
        return metadata

    async def _lookup_by_id(self, channel_id: str) -> Dict[str, Any]:
        return await read_through(
            self._cache,
            cache_key("channels", channel_id, CHANNEL_PART),
            lambda: self._client.channel_by_id(channel_id, CHANNEL_PART)
        )

    async def _lookup_by_username(self, username: str) -> Dict[str, Any]:
        return await read_through(
            self._cache,
            cache_key("channels.forUsername", username, CHANNEL_PART),
            lambda: self._client.channel_by_username(username, CHANNEL_PART)
        )

    @staticmethod
    def _first_item(response: Optional[Dict[str, Any]], ref: ChannelRef) -> Dict[str, Any]:
        items = (response or {}).get("items") or []
        if not items:
            raise ChannelNotFoundError(f"YouTube channel not found: {ref.value!r}")
        return items[0]
