"""
Shared response cache
"""

from .cache_manager import CacheManager, cache_key, read_through

__all__ = ["CacheManager", "cache_key", "read_through"]
