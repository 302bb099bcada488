"""
Application Configuration Model
Represents a validated configuration state
"""

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


class AppConfig:
    """
    Immutable configuration object for the YouTube channel feed.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    """

    def __init__(
        self,
        api_key: str,
        embed_videos: bool = True,
        cache_ttl_seconds: int = 3600,
        request_timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            api_key: YouTube Data API key (non-empty)
            embed_videos: Whether item descriptions embed the video player (default: True)
            cache_ttl_seconds: Lifetime of cached API responses (>= 0, default: 3600)
            request_timeout: Timeout for profile page requests in seconds (> 0)
            user_agent: User-Agent header sent with profile page requests
        """
        self._api_key = api_key
        self._embed_videos = embed_videos
        self._cache_ttl_seconds = cache_ttl_seconds
        self._request_timeout = request_timeout
        self._user_agent = user_agent

    @property
    def api_key(self) -> str:
        """YouTube Data API key."""
        return self._api_key

    @property
    def embed_videos(self) -> bool:
        """Whether item descriptions embed the video player."""
        return self._embed_videos

    @property
    def cache_ttl_seconds(self) -> int:
        """Lifetime of cached API responses in seconds."""
        return self._cache_ttl_seconds

    @property
    def request_timeout(self) -> float:
        """Timeout for profile page requests in seconds."""
        return self._request_timeout

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def __repr__(self) -> str:
        """String representation for debugging. Never includes the API key."""
        return (
            f"AppConfig(embed_videos={self.embed_videos}, "
            f"cache_ttl_seconds={self.cache_ttl_seconds}, "
            f"request_timeout={self.request_timeout})"
        )
