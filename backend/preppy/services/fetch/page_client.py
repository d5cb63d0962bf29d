"""Fetch a recipe page and pull out its embedded structured data."""

from typing import List
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup

from preppy.config import settings
from preppy.logging import get_logger

logger = get_logger(__name__)

JSON_LD_TYPE = "application/ld+json"


class PageFetchError(Exception):
    pass


def is_url(text: str) -> bool:
    if not text or any(ch.isspace() for ch in text):
        return False
    parsed = urlparse(text)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class PageClient:
    def __init__(self) -> None:
        self._timeout = settings.fetch_timeout_s
        self._user_agent = settings.fetch_user_agent

    def _headers(self) -> dict:
        return {"User-Agent": self._user_agent, "Accept": "text/html,application/ld+json"}

    def fetch_text(self, url: str) -> str:
        logger.info("page.fetch url=%s", url)
        try:
            resp = httpx.get(
                url,
                headers=self._headers(),
                timeout=self._timeout,
                follow_redirects=True,
            )
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("page.fetch_failed url=%s error=%s", url, e)
            raise PageFetchError(f"could not fetch {url}: {e}") from e
        return resp.text

    def json_ld_blocks(self, html: str) -> List[str]:
        soup = BeautifulSoup(html, "html.parser")
        blocks = [
            script.string or script.get_text()
            for script in soup.find_all("script", type=JSON_LD_TYPE)
        ]
        logger.info("page.json_ld blocks=%s", len(blocks))
        return [block for block in blocks if block and block.strip()]


page_client = PageClient()
