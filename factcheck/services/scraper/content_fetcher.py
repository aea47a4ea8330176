from bs4 import BeautifulSoup

from factcheck.constants.config import BOILERPLATE_TAGS, MAIN_CONTENT_MIN_CHARS, MAIN_CONTENT_SELECTORS
from factcheck.core.logger import get_logger
from factcheck.core.schemas import PageContent
from factcheck.services.common.http import HttpClientConfig
from factcheck.services.common.url_helpers import normalize_href
from factcheck.services.scraper.dates import extract_last_updated, from_body_text

logger = get_logger(__name__)


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


class ContentFetcher:
    """
    Fetches a single page and extracts readable text plus a "last updated" date.

        1. Normalize the URL (scheme fix, redirect unwrapping)
        2. GET the page
        3. Read structured / labelled modification dates
        4. Strip boilerplate (scripts, navigation, headers, footers, asides)
        5. Fall back to a date found in the visible text
        6. Take the first substantial main-content container, else the body

    Never raises: any failure yields empty content and no date.
    """

    def __init__(self, http_config: HttpClientConfig, max_chars: int = 2000) -> None:
        self.http_config = http_config
        self.max_chars = max_chars

    # ---------------------------------------------------------------------
    # HTTP
    # ---------------------------------------------------------------------
    async def fetch_html(self, url: str) -> str:
        async with self.http_config.session() as session:
            async with session.get(url) as resp:
                resp.raise_for_status()
                return await resp.text()

    # ---------------------------------------------------------------------
    # Extraction
    # ---------------------------------------------------------------------
    @staticmethod
    def extract_main_text(soup: BeautifulSoup) -> str:
        for selector in MAIN_CONTENT_SELECTORS:
            container = soup.select_one(selector)
            if container is None:
                continue
            text = collapse_whitespace(container.get_text(" "))
            if len(text) > MAIN_CONTENT_MIN_CHARS:
                return text

        body = soup.body or soup
        return collapse_whitespace(body.get_text(" "))

    def extract(self, html: str) -> PageContent:
        soup = BeautifulSoup(html, "html.parser")

        last_updated = extract_last_updated(soup)

        for tag in soup(list(BOILERPLATE_TAGS)):
            tag.decompose()

        if last_updated is None:
            body = soup.body or soup
            last_updated = from_body_text(body.get_text(" "))

        text = self.extract_main_text(soup)
        return PageContent(content=text[: self.max_chars], last_updated=last_updated)

    # ---------------------------------------------------------------------
    # Main entry point
    # ---------------------------------------------------------------------
    async def fetch(self, url: str) -> PageContent:
        target = normalize_href(url)
        if not target:
            logger.warning("[ContentFetcher] Attempted to fetch an empty URL")
            return PageContent()

        logger.info(f"[ContentFetcher] Fetching URL: {target}")

        try:
            html = await self.fetch_html(target)
        except Exception as e:
            logger.error(f"[ContentFetcher] HTTP fetch failed for {target}: {e}")
            return PageContent()

        try:
            page = self.extract(html)
        except Exception as e:
            logger.error(f"[ContentFetcher] Extraction failed for {target}: {e}")
            return PageContent()

        logger.info(
            f"[ContentFetcher] Extracted {len(page.content)} chars from {target} "
            f"(last_updated={page.last_updated.isoformat() if page.last_updated else None})"
        )
        return page
