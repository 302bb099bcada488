"""
Channel Reference Domain Model
Classifies raw channel identifiers into id, legacy username or @handle
"""

import re
from dataclasses import dataclass
from typing import Union

from ..errors import InvalidIdentifierError

YOUTUBE_BASE_URL = "https://www.youtube.com"

# UC + 21 URL-safe base64 chars + a final char carrying only 2 significant bits
_CHANNEL_ID_RE = re.compile(r"^UC[\w-]{21}[AQgw]$")
_URL_RE = re.compile(
    r"^(?:https?://)?(?:www\.|m\.)?youtube\.com/(?:(channel|user|c)/)?(@?[^/?#]+)",
    re.I,
)
# First path segments that never name a channel
_RESERVED_PATHS = frozenset({
    "watch", "playlist", "results", "shorts", "feed", "embed", "live",
    "hashtag", "post", "channel", "user", "c", "account", "premium",
})


def is_channel_id(raw: str) -> bool:
    """True when `raw` has the exact shape of a YouTube channel id."""
    if not isinstance(raw, str):
        return False
    return bool(_CHANNEL_ID_RE.match(raw))


@dataclass(frozen=True)
class ChannelId:
    """Opaque channel id (UC...)."""
    value: str

    kind = "id"

    def __post_init__(self):
        if not is_channel_id(self.value):
            raise InvalidIdentifierError(
                f"Invalid YouTube channel ID: {self.value!r}. "
                "You may want to use the username or @handle form instead."
            )

    @property
    def page_url(self) -> str:
        return f"{YOUTUBE_BASE_URL}/channel/{self.value}"

    @property
    def canonical_link(self) -> str:
        return self.page_url


@dataclass(frozen=True)
class Username:
    """Legacy username, addressed as /user/<name>."""
    value: str

    kind = "username"

    @property
    def page_url(self) -> str:
        return f"{YOUTUBE_BASE_URL}/{self.value}"

    @property
    def canonical_link(self) -> str:
        return f"{YOUTUBE_BASE_URL}/user/{self.value}"


@dataclass(frozen=True)
class Handle:
    """@handle. `value` is stored without the leading '@'."""
    value: str

    kind = "handle"

    @property
    def page_url(self) -> str:
        return f"{YOUTUBE_BASE_URL}/@{self.value}"

    @property
    def canonical_link(self) -> str:
        return self.page_url


ChannelRef = Union[ChannelId, Username, Handle]


def parse_channel_ref(raw: str) -> ChannelRef:
    """
    Classifies user input into a ChannelRef.

    Accepts a bare channel id, '@handle', legacy username, or a youtube.com
    URL using the /channel/, /user/, /@ or bare /<username> forms.
    Custom /c/ URLs and non-channel pages (watch, playlist, ...) are rejected.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidIdentifierError("Channel identifier cannot be empty")

    identifier = raw.strip()

    match = _URL_RE.match(identifier)
    if match:
        prefix, identifier = match.group(1), match.group(2)
        prefix = prefix.lower() if prefix else None
        if prefix == "channel":
            return ChannelId(identifier)
        if prefix == "c":
            raise InvalidIdentifierError(
                f"Custom channel URLs are not supported: {raw.strip()!r}. "
                "Use the @handle or channel ID instead."
            )
        if prefix is None and identifier.lower() in _RESERVED_PATHS:
            raise InvalidIdentifierError(f"Not a channel URL: {raw.strip()!r}")
        if prefix == "user":
            return Username(identifier)

    if identifier.startswith("@"):
        name = identifier[1:]
        if not name:
            raise InvalidIdentifierError("Handle cannot be empty")
        return Handle(name)

    if is_channel_id(identifier):
        return ChannelId(identifier)

    return Username(identifier)
