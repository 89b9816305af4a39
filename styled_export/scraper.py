# styled_export/scraper.py

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional
from urllib.parse import urljoin

import aiohttp
from bs4 import BeautifulSoup, Tag

from .errors import StylesheetFetchError

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Awaitable[str]]


def load_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


async def fetch_document(url: str, timeout: Optional[float] = None) -> str:
    logger.info("Fetching page %s", url)
    async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout)) as session:
        async with session.get(url) as response:
            response.raise_for_status()
            return await response.text()


def is_stylesheet_link(link: Tag, href: str) -> bool:
    lowered = href.lower()
    rel = " ".join(link.get("rel") or [])
    return (
        (rel == "stylesheet" or lowered.endswith(".css"))
        and not lowered.startswith("blob:")
        and link.get("media") != "print"
    )


class StylesheetCollector:
    """Gathers the raw CSS a document renders with.

    Linked stylesheets come first, in link order, then the contents of the
    inline <style> blocks. A stylesheet that can't be fetched fails the
    whole collection.
    """

    def __init__(self, document: BeautifulSoup, base_url: Optional[str] = None,
                 fetch: Optional[Fetcher] = None, timeout: Optional[float] = None):
        self.document = document
        self.base_url = base_url
        self.fetch = fetch
        self.timeout = timeout

    def stylesheet_urls(self) -> List[str]:
        urls = []
        for link in self.document.find_all("link"):
            href = link.get("href")
            if not href:
                continue
            if self.base_url:
                href = urljoin(self.base_url, href)
            if is_stylesheet_link(link, href):
                urls.append(href)
        return urls

    def inline_styles(self) -> List[str]:
        return [style.get_text() for style in self.document.find_all("style")]

    async def collect(self) -> List[str]:
        urls = self.stylesheet_urls()
        logger.debug("Found %d linked stylesheets", len(urls))

        if self.fetch is not None:
            linked = await self._gather(self.fetch, urls)
        else:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                linked = await self._gather(lambda url: download_stylesheet(session, url), urls)

        sheets = [css for css in linked + self.inline_styles() if css]
        logger.info("Collected %d stylesheets", len(sheets))
        return sheets

    @staticmethod
    async def _gather(fetch: Fetcher, urls: List[str]) -> List[str]:
        # gather() keeps results in argument order, whatever finishes first.
        # Every download settles before the session closes; the first
        # failure in link order is the one raised.
        results = await asyncio.gather(*(fetch(url) for url in urls), return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return list(results)


async def download_stylesheet(session: aiohttp.ClientSession, url: str) -> str:
    try:
        async with session.get(url) as response:
            response.raise_for_status()
            text = await response.text()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error("Error downloading %s: %s", url, e)
        raise StylesheetFetchError(url, str(e) or type(e).__name__) from e
    logger.debug("Downloaded %s (%d bytes)", url, len(text))
    return text
