"""
YouTube Channel Feed
Resolves a channel identifier into a normalized feed of its recent uploads.
"""

__version__ = "0.1.0"
