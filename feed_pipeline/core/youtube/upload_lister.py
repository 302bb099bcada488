"""
Upload Lister Service
Lists the recent uploads of a channel from its uploads playlist.
"""

import logging
from typing import List

from shared.cache import CacheManager, cache_key, read_through

from .models import UploadEntry
from .youtube_client import YouTubeDataClient

logger = logging.getLogger(__name__)

PLAYLIST_PART = "snippet"


class UploadLister:
    """
    Service responsible for listing the recent uploads of a playlist.

    Responsibilities:
    - Issue a single playlistItems query (first page only).
    - Go through the cache; storage and expiry belong to the cache.
    - Keep the upstream order (most recent first).
    """

    def __init__(self, youtube_client: YouTubeDataClient, cache: CacheManager):
        self._client = youtube_client
        self._cache = cache

    async def list_uploads(self, playlist_id: str) -> List[UploadEntry]:
        """
        Retrieves the upload entries of the playlist.

        Returns:
            List[UploadEntry]: Entries in upstream order.
        """
        response = await read_through(
            self._cache,
            cache_key("playlistItems", playlist_id, PLAYLIST_PART),
            lambda: self._client.playlist_items(playlist_id, PLAYLIST_PART)
        )

        items = response.get("items", []) or []
        entries = [UploadEntry.from_api(item) for item in items if item.get("snippet")]

        if not entries:
            logger.warning(f"No uploads found in playlist {playlist_id}")
        else:
            logger.info(f"Listed {len(entries)} uploads from playlist {playlist_id}")

        return entries
