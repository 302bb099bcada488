from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from feed_pipeline.core.youtube import ProfilePageFetcher, YouTubeDataClient, parse_profile_page
from shared.cache import CacheManager

CHANNEL_ID = "UCDwDMPOZfxVV0x_dz0eQ8KQ"
UPLOADS_ID = "UUDwDMPOZfxVV0x_dz0eQ8KQ"


def profile_html(
    logo: str = "https://yt3.example/logo.jpg",
    description: str = "Channel about things",
    channel_id: Optional[str] = None,
    name: Optional[str] = None,
    og_title: Optional[str] = None,
) -> str:
    tags = [
        f'<meta property="og:image" content="{logo}">',
        f'<meta property="og:description" content="{description}">',
    ]
    if og_title:
        tags.append(f'<meta property="og:title" content="{og_title}">')
    if channel_id:
        tags.append(f'<meta itemprop="identifier" content="{channel_id}">')
    if name:
        tags.append(f'<meta itemprop="name" content="{name}">')
    return f"<html><head>{''.join(tags)}</head><body></body></html>"


def channel_response(uploads: str = UPLOADS_ID, channel_id: str = CHANNEL_ID) -> dict:
    return {
        "kind": "youtube#channelListResponse",
        "items": [
            {
                "id": channel_id,
                "contentDetails": {"relatedPlaylists": {"likes": "", "uploads": uploads}},
            }
        ],
    }


def playlist_item(video_id: str, title: str, thumbnails: Optional[dict] = None, **snippet) -> dict:
    if thumbnails is None:
        thumbnails = {
            "default": {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg", "width": 120, "height": 90},
            "medium": {"url": f"https://i.ytimg.com/vi/{video_id}/mqdefault.jpg", "width": 320, "height": 180},
            "high": {"url": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg", "width": 480, "height": 360},
        }
    body = {
        "publishedAt": "2024-05-01T12:00:00Z",
        "channelId": CHANNEL_ID,
        "title": title,
        "description": f"About {title}",
        "thumbnails": thumbnails,
        "channelTitle": "Test Channel",
        "videoOwnerChannelTitle": "Test Channel",
        "resourceId": {"kind": "youtube#video", "videoId": video_id},
    }
    body.update(snippet)
    return {"kind": "youtube#playlistItem", "id": f"item-{video_id}", "snippet": body}


def playlist_response(*items: dict) -> dict:
    return {"kind": "youtube#playlistItemListResponse", "items": list(items)}


@pytest.fixture
def cache():
    return CacheManager(ttl_seconds=600)


@pytest.fixture
def youtube_client():
    client = MagicMock(spec=YouTubeDataClient)
    client.channel_by_id = AsyncMock(return_value=channel_response())
    client.channel_by_username = AsyncMock(return_value=channel_response())
    client.playlist_items = AsyncMock(return_value=playlist_response())
    return client


@pytest.fixture
def page_fetcher():
    fetcher = MagicMock(spec=ProfilePageFetcher)
    fetcher.html = profile_html()

    async def fetch_page(url):
        return parse_profile_page(fetcher.html)

    fetcher.fetch_page = AsyncMock(side_effect=fetch_page)
    return fetcher
