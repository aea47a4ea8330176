from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchEngine(str, Enum):
    """Public search surfaces queried for evidence."""

    GOOGLE = "google"
    DUCKDUCKGO = "duckduckgo"


class Verdict(str, Enum):
    """Possible verdict outcomes for a statement."""

    TRUE = "TRUE"
    FALSE = "FALSE"
    PARTIALLY_TRUE = "PARTIALLY_TRUE"
    CONTEXT_NOT_CLEAR = "CONTEXT_NOT_CLEAR"
    UNKNOWN = "UNKNOWN"


class FreshnessPolicy(str, Enum):
    """How fetched page content is filtered before it reaches the model."""

    KEEP_ALL = "keep_all"
    DATED_ONLY = "dated_only"


class SearchResult(BaseModel):
    """One candidate result extracted from a search results page."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    url: str
    snippet: str = ""
    source: SearchEngine


class PageContent(BaseModel):
    """Readable text and freshness metadata extracted from a fetched page."""

    model_config = ConfigDict(frozen=True)

    content: str = ""
    last_updated: Optional[datetime] = None


class ContentDetail(SearchResult):
    """A search result enriched with its page content."""

    content: str = ""
    last_updated: Optional[datetime] = None


class EvidenceBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    search_results: List[SearchResult] = Field(default_factory=list)
    content_details: List[ContentDetail] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.search_results and not self.content_details


class Source(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=1)
    name: str
    url: str


class VerdictRecord(BaseModel):
    """Final, immutable answer returned for one fact-check request."""

    model_config = ConfigDict(frozen=True)

    verdict: Verdict
    explanation: str
    sources: List[Source] = Field(default_factory=list)
    confidence: float = Field(ge=0.0, le=1.0)
    used_web_scraping: bool = False


class FactCheckRequest(BaseModel):
    statement: str = ""


class TrendingTopicsResponse(BaseModel):
    topics: List[str] = Field(default_factory=list)
