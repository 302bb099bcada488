"""
Item Transformer
Maps raw upload entries into normalized feed items.
"""

import html
import logging
import re
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from .models import FeedItem, FeedItemExtra, Thumbnail, UploadEntry

logger = logging.getLogger(__name__)

# Titles YouTube substitutes for removed or access-revoked videos
UNAVAILABLE_TITLES = frozenset({"Private video", "Deleted video"})

THUMBNAIL_PREFERENCE = ("maxres", "standard", "high", "medium", "default")

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
EMBED_URL = "https://www.youtube-nocookie.com/embed/{video_id}"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def is_unavailable(entry: UploadEntry) -> bool:
    return entry.title in UNAVAILABLE_TITLES


def select_thumbnail(thumbnails: Sequence[Thumbnail]) -> Optional[Thumbnail]:
    """Highest preferred variant; the widest unknown variant otherwise."""
    by_name = {thumb.name: thumb for thumb in thumbnails}
    for name in THUMBNAIL_PREFERENCE:
        if name in by_name:
            return by_name[name]
    if thumbnails:
        return max(thumbnails, key=lambda thumb: thumb.width)
    return None


def format_description(description: Optional[str]) -> str:
    """Escapes the text and turns line breaks into <br>. URLs stay plain text."""
    if not description:
        return ""
    return _LINE_BREAK_RE.sub("<br>", html.escape(description, quote=False))


def render_description(embed: bool, video_id: str, thumbnail: Optional[Thumbnail], intro: str) -> str:
    parts = []
    if embed:
        parts.append(
            '<iframe id="ytplayer" type="text/html" width="640" height="360" '
            f'src="{html.escape(EMBED_URL.format(video_id=video_id))}" '
            'frameborder="0" allowfullscreen referrerpolicy="strict-origin-when-cross-origin"></iframe>'
        )
    if thumbnail is not None:
        parts.append(f'<img src="{html.escape(thumbnail.url)}">')
    if intro:
        parts.append(intro)
    return "<br>".join(parts)


def parse_published_at(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable publishedAt: {value!r}")
        return None


def transform_entry(entry: UploadEntry, embed_enabled: bool) -> FeedItem:
    video_id = entry.video_id
    thumbnail = select_thumbnail(entry.thumbnails)
    intro = format_description(entry.description)

    return FeedItem(
        title=entry.title,
        cover_url=thumbnail.url if thumbnail else None,
        description_html=render_description(embed_enabled, video_id, thumbnail, intro),
        published_at=parse_published_at(entry.published_at),
        link=WATCH_URL.format(video_id=video_id),
        author=entry.owner_channel_title or entry.channel_title,
        extra=FeedItemExtra(
            intro=intro,
            duration=entry.duration,
            embed_url=EMBED_URL.format(video_id=video_id)
        )
    )


def transform(entries: Iterable[UploadEntry], embed_enabled: bool) -> List[FeedItem]:
    """
    Maps entries to feed items, dropping private and deleted videos.
    Output order follows input order.
    """
    return [transform_entry(entry, embed_enabled) for entry in entries if not is_unavailable(entry)]
