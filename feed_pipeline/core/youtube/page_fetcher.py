"""
Channel Profile Page Fetcher
Downloads the public channel page and exposes its meta-tags.
"""

import logging
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from ..config.app_config import DEFAULT_USER_AGENT
from ..errors import UpstreamError

logger = logging.getLogger(__name__)


class ProfilePage:
    """Parsed channel profile page. Only meta-tags are of interest."""

    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    def get_meta(self, property: Optional[str] = None, itemprop: Optional[str] = None) -> Optional[str]:
        """
        Returns the `content` of the first matching meta-tag, or None.

        Exactly one of `property` (Open Graph) or `itemprop` (schema.org) is expected.
        """
        if property:
            tag = self._soup.find("meta", attrs={"property": property})
        elif itemprop:
            tag = self._soup.find("meta", attrs={"itemprop": itemprop})
        else:
            raise ValueError("get_meta needs either property or itemprop")

        if tag is None:
            return None
        content = tag.get("content")
        return content.strip() if content and content.strip() else None


def parse_profile_page(html: str) -> ProfilePage:
    return ProfilePage(BeautifulSoup(html or "", "html.parser"))


class ProfilePageFetcher:
    """
    Fetches channel pages over HTTP.

    No retries here; a failed request surfaces as UpstreamError.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        client: Optional[httpx.AsyncClient] = None
    ):
        self._timeout = timeout
        self._headers = {
            "User-Agent": user_agent,
            "Accept-Language": "en-US,en;q=0.9",
        }
        self._client = client

    async def fetch(self, url: str) -> str:
        """Returns the raw HTML of `url`."""
        logger.info(f"Fetching profile page: {url}")
        try:
            if self._client is not None:
                response = await self._client.get(url, headers=self._headers, timeout=self._timeout)
            else:
                async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                    response = await client.get(url, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch {url}: {e}")
            raise UpstreamError(f"Failed to fetch {url}: {e}") from e
        return response.text

    async def fetch_page(self, url: str) -> ProfilePage:
        return parse_profile_page(await self.fetch(url))
