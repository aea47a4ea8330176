import asyncio
from typing import List, Sequence

from factcheck.core.logger import get_logger
from factcheck.core.schemas import SearchResult
from factcheck.services.common.url_helpers import dedup_by_url
from factcheck.services.search.base import SearchAdapter

logger = get_logger(__name__)


class EvidenceAggregator:
    """
    Runs every registered search adapter concurrently and merges their results.

    Ordering is deterministic: segments follow adapter registration order and
    each adapter's own ordering is kept, whatever order the requests finish in.
    One adapter failing (even by raising) never fails the others.
    """

    def __init__(self, adapters: Sequence[SearchAdapter]) -> None:
        self.adapters = list(adapters)

    async def aggregate(self, query: str, max_results: int = 5) -> List[SearchResult]:
        outcomes = await asyncio.gather(
            *(adapter.search(query, max_results) for adapter in self.adapters),
            return_exceptions=True,
        )

        merged: List[SearchResult] = []
        for adapter, outcome in zip(self.adapters, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(f"[EvidenceAggregator] {adapter.name} failed: {outcome!r}")
                continue
            merged.extend(outcome)

        unique = dedup_by_url(merged)
        logger.info(
            f"[EvidenceAggregator] {len(merged)} raw results → {len(unique)} unique, "
            f"returning {min(len(unique), max_results)}"
        )
        return unique[:max_results]
