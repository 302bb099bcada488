"""
YouTube integration module
"""

from .channel_info import ChannelMetadata
from .channel_ref import ChannelId, ChannelRef, Handle, Username, is_channel_id, parse_channel_ref
from .channel_resolver import ChannelResolver
from .models import FeedItem, FeedItemExtra, Thumbnail, UploadEntry
from .page_fetcher import ProfilePage, ProfilePageFetcher, parse_profile_page
from .upload_lister import UploadLister
from .youtube_client import YouTubeDataClient

__all__ = [
    "ChannelMetadata",
    "ChannelId",
    "ChannelRef",
    "Handle",
    "Username",
    "is_channel_id",
    "parse_channel_ref",
    "ChannelResolver",
    "FeedItem",
    "FeedItemExtra",
    "Thumbnail",
    "UploadEntry",
    "ProfilePage",
    "ProfilePageFetcher",
    "parse_profile_page",
    "UploadLister",
    "YouTubeDataClient",
]
