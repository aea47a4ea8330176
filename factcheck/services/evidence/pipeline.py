"""
Evidence Pipeline: search aggregation followed by page content extraction.

    1. Aggregate search results from every engine (capped)
    2. Fetch the first few result pages concurrently
    3. Apply the freshness policy to the fetched pages
    4. Return one EvidenceBundle (empty on total failure, never raises)
"""

import asyncio
from datetime import datetime, timezone
from typing import List, Optional

from factcheck.core.config import Settings, settings
from factcheck.core.logger import get_logger
from factcheck.core.schemas import ContentDetail, EvidenceBundle, FreshnessPolicy, PageContent, SearchResult
from factcheck.services.common.http import HttpClientConfig
from factcheck.services.scraper.content_fetcher import ContentFetcher
from factcheck.services.search.aggregator import EvidenceAggregator
from factcheck.services.search.duckduckgo import DuckDuckGoSearchAdapter
from factcheck.services.search.google import GoogleSearchAdapter

logger = get_logger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def apply_freshness_policy(details: List[ContentDetail], policy: FreshnessPolicy) -> List[ContentDetail]:
    """
    KEEP_ALL keeps aggregation order. DATED_ONLY drops pages without a resolved
    date and sorts the rest newest first.
    """
    if policy is FreshnessPolicy.KEEP_ALL:
        return list(details)

    dated = [d for d in details if d.last_updated is not None]
    return sorted(dated, key=lambda d: d.last_updated or _OLDEST, reverse=True)


class EvidencePipeline:
    def __init__(
        self,
        aggregator: EvidenceAggregator,
        fetcher: ContentFetcher,
        max_results: int = 5,
        fetch_limit: int = 3,
        freshness_policy: FreshnessPolicy = FreshnessPolicy.KEEP_ALL,
    ) -> None:
        self.aggregator = aggregator
        self.fetcher = fetcher
        self.max_results = max_results
        self.fetch_limit = fetch_limit
        self.freshness_policy = freshness_policy

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "EvidencePipeline":
        """Wire the default Google + DuckDuckGo pipeline from application settings."""
        config = config or settings
        search_http = HttpClientConfig.for_search(config)
        aggregator = EvidenceAggregator(
            [
                GoogleSearchAdapter(search_http),
                DuckDuckGoSearchAdapter(search_http),
            ]
        )
        fetcher = ContentFetcher(HttpClientConfig.for_page_fetch(config), max_chars=config.CONTENT_MAX_CHARS)
        return cls(
            aggregator,
            fetcher,
            max_results=config.SEARCH_MAX_RESULTS,
            fetch_limit=config.CONTENT_FETCH_LIMIT,
            freshness_policy=FreshnessPolicy(config.EVIDENCE_FRESHNESS_POLICY),
        )

    async def _fetch_details(self, results: List[SearchResult]) -> List[ContentDetail]:
        outcomes = await asyncio.gather(
            *(self.fetcher.fetch(result.url) for result in results),
            return_exceptions=True,
        )

        details: List[ContentDetail] = []
        for result, outcome in zip(results, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(f"[EvidencePipeline] Fetch failed for {result.url}: {outcome!r}")
                outcome = PageContent()
            details.append(
                ContentDetail(
                    **result.model_dump(),
                    content=outcome.content,
                    last_updated=outcome.last_updated,
                )
            )
        return details

    async def gather_evidence(self, statement: str) -> EvidenceBundle:
        try:
            logger.info(f"[EvidencePipeline] Searching evidence for: {statement[:100]}")
            search_results = await self.aggregator.aggregate(statement, self.max_results)

            if not search_results:
                logger.info("[EvidencePipeline] No search results found")
                return EvidenceBundle()

            fetched = await self._fetch_details(search_results[: self.fetch_limit])
            with_content = sum(1 for d in fetched if d.content)
            logger.info(f"[EvidencePipeline] Extracted content from {with_content}/{len(fetched)} pages")

            content_details = apply_freshness_policy(fetched, self.freshness_policy)
            if len(content_details) != len(fetched):
                logger.info(
                    f"[EvidencePipeline] Freshness policy kept {len(content_details)}/{len(fetched)} pages "
                    f"(policy={self.freshness_policy.value})"
                )

            return EvidenceBundle(search_results=search_results, content_details=content_details)

        except Exception as e:
            logger.error(f"[EvidencePipeline] Error gathering evidence: {e}")
            return EvidenceBundle()
