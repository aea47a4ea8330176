from typing import List, Optional
from urllib.parse import quote_plus

from bs4 import BeautifulSoup, Tag

from factcheck.constants.config import INTERSTITIAL_MARKERS
from factcheck.core.logger import get_logger
from factcheck.core.schemas import SearchEngine, SearchResult
from factcheck.services.common.http import HttpClientConfig
from factcheck.services.common.url_helpers import normalize_href

logger = get_logger(__name__)


class SearchAdapter:
    """
    One public search surface scraped over plain HTTP.

    Subclasses provide the endpoint template and CSS selectors. The adapter:
        - issues exactly one GET per search
        - parses up to ``max_results`` entries from the result containers
        - never raises: network errors, non-2xx responses and parse
          failures are logged and yield an empty list
    """

    engine: SearchEngine
    search_url: str
    result_selector: str
    title_selector: str
    link_selector: str
    snippet_selector: str

    def __init__(self, http_config: HttpClientConfig) -> None:
        self.http_config = http_config

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def build_url(self, query: str, max_results: int) -> str:
        return self.search_url.format(query=quote_plus(query), num=max_results)

    # ---------------------------------------------------------------------
    # HTTP
    # ---------------------------------------------------------------------
    async def fetch_html(self, url: str) -> str:
        async with self.http_config.session() as session:
            async with session.get(url) as resp:
                resp.raise_for_status()
                return await resp.text()

    # ---------------------------------------------------------------------
    # Parsing
    # ---------------------------------------------------------------------
    def resolve_href(self, href: Optional[str]) -> Optional[str]:
        return normalize_href(href)

    @staticmethod
    def _text(container: Tag, selector: str) -> str:
        element = container.select_one(selector)
        if element is None:
            return ""
        return " ".join(element.get_text(" ", strip=True).split())

    def _href(self, container: Tag) -> Optional[str]:
        link = container.select_one(self.link_selector)
        if link is None:
            return None
        href = link.get("href")
        return href if isinstance(href, str) else None

    def parse_results(self, html: str, max_results: int) -> List[SearchResult]:
        soup = BeautifulSoup(html, "html.parser")
        results: List[SearchResult] = []

        for container in soup.select(self.result_selector):
            if len(results) >= max_results:
                break

            url = self.resolve_href(self._href(container))
            if not url:
                continue

            results.append(
                SearchResult(
                    title=self._text(container, self.title_selector),
                    url=url,
                    snippet=self._text(container, self.snippet_selector),
                    source=self.engine,
                )
            )

        return results

    def detect_interstitial(self, html: str) -> bool:
        """Diagnostic only: CAPTCHA or consent walls do not change behaviour."""
        lowered = html.lower()
        hit = next((marker for marker in INTERSTITIAL_MARKERS if marker in lowered), None)
        if hit:
            logger.warning(f"[{self.name}] Possible anti-scraping interstitial detected (marker={hit!r})")
            return True
        return False

    # ---------------------------------------------------------------------
    # Main entry point
    # ---------------------------------------------------------------------
    async def search(self, query: str, max_results: int = 5) -> List[SearchResult]:
        url = self.build_url(query, max_results)

        try:
            html = await self.fetch_html(url)
        except Exception as e:
            logger.error(f"[{self.name}] Search request failed for query='{query}': {e}")
            return []

        self.detect_interstitial(html)

        try:
            results = self.parse_results(html, max_results)
        except Exception as e:
            logger.error(f"[{self.name}] Failed to parse results for query='{query}': {e}")
            return []

        logger.info(f"[{self.name}] Parsed {len(results)} results for query='{query}'")
        return results
