"""
Error taxonomy for the channel feed pipeline.
"""


class FeedError(Exception):
    """Base class for every error raised while building a channel feed."""
    pass


class ChannelResolutionError(FeedError):
    """Exception raised for errors in channel resolution."""
    pass


class InvalidIdentifierError(ChannelResolutionError):
    """The identifier is malformed. Raised before any network call."""
    pass


class ChannelNotFoundError(ChannelResolutionError):
    """The identifier is well-formed but upstream has no such channel."""
    pass


class UpstreamError(FeedError):
    """A page fetch or data API query failed."""
    pass
