from factcheck.constants.config import (
    DUCKDUCKGO_LINK_SELECTOR,
    DUCKDUCKGO_RESULT_SELECTOR,
    DUCKDUCKGO_SEARCH_URL,
    DUCKDUCKGO_SNIPPET_SELECTOR,
    DUCKDUCKGO_TITLE_SELECTOR,
)
from factcheck.core.schemas import SearchEngine
from factcheck.services.search.base import SearchAdapter


class DuckDuckGoSearchAdapter(SearchAdapter):
    """Scrapes the script-free DuckDuckGo HTML endpoint."""

    engine = SearchEngine.DUCKDUCKGO
    search_url = DUCKDUCKGO_SEARCH_URL
    result_selector = DUCKDUCKGO_RESULT_SELECTOR
    title_selector = DUCKDUCKGO_TITLE_SELECTOR
    link_selector = DUCKDUCKGO_LINK_SELECTOR
    snippet_selector = DUCKDUCKGO_SNIPPET_SELECTOR
