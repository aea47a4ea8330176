"""
Page scraping services: readable content and freshness extraction.
"""

from .content_fetcher import ContentFetcher

__all__ = ["ContentFetcher"]
