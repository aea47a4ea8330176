"""
Fact-check API routes.

Endpoints:
  POST /verify-fact      - Check a statement and return a verdict record
  GET  /trending-topics  - Suggest fact-check worthy questions (optionally about ?query=)
"""

from functools import lru_cache
from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from factcheck.core.config import settings
from factcheck.core.errors import (
    FactCheckError,
    ProviderAuthError,
    ProviderConfigurationError,
    ProviderRateLimitError,
    ProviderTimeoutError,
    ResponseParseError,
    StatementValidationError,
)
from factcheck.core.logger import get_logger
from factcheck.core.schemas import FactCheckRequest, TrendingTopicsResponse, VerdictRecord
from factcheck.services.fact_checker import FactChecker
from factcheck.services.llms.groq_service import GroqService
from factcheck.services.topics.topic_suggester import TopicSuggester

logger = get_logger(__name__)

router = APIRouter()

_STATUS_BY_ERROR = (
    (StatementValidationError, 400),
    (ProviderConfigurationError, 500),
    (ProviderAuthError, 401),
    (ProviderRateLimitError, 429),
    (ProviderTimeoutError, 504),
    (ResponseParseError, 500),
)


def error_response(error: FactCheckError, **extra: Any) -> JSONResponse:
    """Translate a typed failure into the JSON error body and status code."""
    status = next((code for error_type, code in _STATUS_BY_ERROR if isinstance(error, error_type)), 500)
    body: Dict[str, Any] = {"error": error.message, **extra}
    if isinstance(error, ResponseParseError):
        body["rawResponse"] = error.raw_text
    return JSONResponse(status_code=status, content=body)


@lru_cache(maxsize=1)
def get_fact_checker() -> FactChecker:
    return FactChecker.from_settings(settings)


def get_topic_suggester_factory() -> Callable[[], TopicSuggester]:
    def _factory() -> TopicSuggester:
        return TopicSuggester(GroqService(), race_timeout=settings.MODEL_RACE_TIMEOUT_SECONDS)

    return _factory


@router.post("/verify-fact", response_model=VerdictRecord)
async def verify_fact(
    request: FactCheckRequest,
    fact_checker: FactChecker = Depends(get_fact_checker),
):
    try:
        return await fact_checker.check_fact(request.statement)
    except FactCheckError as e:
        logger.warning(f"[FactCheckRouter] verify-fact failed: {type(e).__name__}: {e.message}")
        return error_response(e)


@router.get("/trending-topics", response_model=TrendingTopicsResponse)
async def trending_topics(
    query: Optional[str] = None,
    suggester_factory: Callable[[], TopicSuggester] = Depends(get_topic_suggester_factory),
):
    try:
        topics = await suggester_factory().suggest(query)
        return TrendingTopicsResponse(topics=topics)
    except FactCheckError as e:
        logger.warning(f"[FactCheckRouter] trending-topics failed: {type(e).__name__}: {e.message}")
        # empty list lets clients render gracefully
        return error_response(e, topics=[])
