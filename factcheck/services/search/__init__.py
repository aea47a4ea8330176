"""
Search services: per-engine scrapers and the concurrent evidence aggregator.
"""

from factcheck.services.search.aggregator import EvidenceAggregator
from factcheck.services.search.base import SearchAdapter
from factcheck.services.search.duckduckgo import DuckDuckGoSearchAdapter
from factcheck.services.search.google import GoogleSearchAdapter

__all__ = ["EvidenceAggregator", "SearchAdapter", "GoogleSearchAdapter", "DuckDuckGoSearchAdapter"]
