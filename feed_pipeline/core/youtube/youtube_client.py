"""
YouTube Data API Client
Async access to the three lookups the feed needs: channel by id,
channel by legacy username, and playlist items.
"""

import asyncio
import logging
from functools import partial
from typing import Any, Dict

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import build_http

from ..config.config_loader import ConfigurationMissingError
from ..errors import UpstreamError

logger = logging.getLogger(__name__)

PLAYLIST_PAGE_SIZE = 50


class YouTubeDataClient:
    """
    YouTube Data API v3 client.

    Every call returns the raw JSON response. Requests run on the default
    executor with a fresh HTTP transport each, since httplib2 connections
    are not thread-safe.
    """

    def __init__(self, api_key: str, service=None):
        """Initialize the YouTube API service."""
        if not api_key or not api_key.strip():
            raise ConfigurationMissingError()
        if service is not None:
            self._service = service
            return
        try:
            # static_discovery=False prevents the 'file_cache' warning in logs
            self._service = build('youtube', 'v3', developerKey=api_key, static_discovery=False)
        except (HttpError, httplib2.HttpLib2Error, OSError) as e:
            logger.error(f"YouTube API discovery failed: {e}")
            raise UpstreamError(f"YouTube API discovery failed: {e}") from e

    async def channel_by_id(self, channel_id: str, part: str = "contentDetails") -> Dict[str, Any]:
        """channels.list filtered by channel id."""
        request = self._service.channels().list(part=part, id=channel_id)
        return await self._execute(request, f"channels.list(id={channel_id})")

    async def channel_by_username(self, username: str, part: str = "contentDetails") -> Dict[str, Any]:
        """channels.list filtered by legacy username."""
        request = self._service.channels().list(part=part, forUsername=username)
        return await self._execute(request, f"channels.list(forUsername={username})")

    async def playlist_items(self, playlist_id: str, part: str = "snippet") -> Dict[str, Any]:
        """First page of playlistItems.list for the playlist."""
        request = self._service.playlistItems().list(
            part=part,
            playlistId=playlist_id,
            maxResults=PLAYLIST_PAGE_SIZE
        )
        return await self._execute(request, f"playlistItems.list(playlistId={playlist_id})")

    async def _execute(self, request, description: str) -> Dict[str, Any]:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, partial(request.execute, http=build_http()))
        except HttpError as e:
            logger.error(f"YouTube API error on {description}: {e}")
            raise UpstreamError(f"YouTube API error on {description}: {e}") from e
        except (httplib2.HttpLib2Error, OSError) as e:
            logger.error(f"YouTube API transport error on {description}: {e}")
            raise UpstreamError(f"YouTube API transport error on {description}: {e}") from e
