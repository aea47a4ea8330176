from typing import Optional
from urllib.parse import parse_qs, urlparse

from factcheck.constants.config import (
    GOOGLE_LINK_SELECTOR,
    GOOGLE_RESULT_SELECTOR,
    GOOGLE_SEARCH_URL,
    GOOGLE_SNIPPET_SELECTOR,
    GOOGLE_TITLE_SELECTOR,
)
from factcheck.core.schemas import SearchEngine
from factcheck.services.common.url_helpers import normalize_href
from factcheck.services.search.base import SearchAdapter


class GoogleSearchAdapter(SearchAdapter):
    """Scrapes Google's HTML results page."""

    engine = SearchEngine.GOOGLE
    search_url = GOOGLE_SEARCH_URL
    result_selector = GOOGLE_RESULT_SELECTOR
    title_selector = GOOGLE_TITLE_SELECTOR
    link_selector = GOOGLE_LINK_SELECTOR
    snippet_selector = GOOGLE_SNIPPET_SELECTOR

    def resolve_href(self, href: Optional[str]) -> Optional[str]:
        # Script-less result pages wrap targets as /url?q=<target>&sa=...
        if href and href.startswith("/url?"):
            target = parse_qs(urlparse(href).query).get("q", [""])[0]
            href = target or None
        return normalize_href(href)
