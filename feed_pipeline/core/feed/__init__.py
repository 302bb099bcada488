"""
Feed assembly module
"""

from .channel_feed import ChannelFeed, ChannelFeedBuilder

__all__ = ["ChannelFeed", "ChannelFeedBuilder"]
