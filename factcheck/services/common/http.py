"""
Explicit HTTP client configuration shared by search adapters and the content fetcher.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

import aiohttp

from factcheck.constants.config import PAGE_FETCH_HEADERS, SEARCH_HEADERS
from factcheck.core.config import Settings


@dataclass(frozen=True)
class HttpClientConfig:
    """
    Immutable settings for one family of outbound requests.

    ``verify_tls=False`` relaxes certificate verification for the scraped
    surfaces only; it is applied per session, never process-wide.
    """

    timeout: float
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    verify_tls: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def session(self) -> aiohttp.ClientSession:
        """Open a client session bound to this configuration."""
        connector = aiohttp.TCPConnector(ssl=self.verify_tls)
        return aiohttp.ClientSession(
            headers=dict(self.headers),
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            connector=connector,
        )

    @classmethod
    def for_search(cls, settings: Settings) -> "HttpClientConfig":
        return cls(
            timeout=settings.SEARCH_TIMEOUT_SECONDS,
            headers=SEARCH_HEADERS,
            verify_tls=settings.HTTP_VERIFY_TLS,
        )

    @classmethod
    def for_page_fetch(cls, settings: Settings) -> "HttpClientConfig":
        return cls(
            timeout=settings.PAGE_FETCH_TIMEOUT_SECONDS,
            headers=PAGE_FETCH_HEADERS,
            verify_tls=settings.HTTP_VERIFY_TLS,
        )
