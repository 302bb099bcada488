"""
Shared infrastructure for YouTube Channel Feed
"""
