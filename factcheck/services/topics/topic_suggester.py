"""
Trending fact-check topic suggestions.

The model is asked for a bare JSON array of questions. Replies are parsed with
a fallback chain (direct array → embedded array → line reconstruction →
question harvesting) since models often wrap or mangle the array.
"""

import asyncio
import json
import re
from typing import Any, List, Optional

from factcheck.constants.config import RAW_RESPONSE_LOG_CHARS
from factcheck.constants.llm_prompts import TRENDING_TOPICS_FOR_QUERY_PROMPT, TRENDING_TOPICS_PROMPT
from factcheck.core.errors import ProviderTimeoutError, TopicParseError
from factcheck.core.logger import get_logger
from factcheck.services.llms.groq_service import GroqService

logger = get_logger(__name__)

_TRAILING_COMMA_RE = re.compile(r",\s*\]")
_QUESTION_RE = re.compile(r"\"([^\"]+\?)\"|\b([A-Z][^?\"\n]+\?)")


def _as_topics(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _load_array(text: str) -> Optional[List[str]]:
    try:
        return _as_topics(json.loads(text))
    except (ValueError, RecursionError):
        return None


def parse_topics(text: str) -> Optional[List[str]]:
    """Return the suggested topics, or None when nothing usable was found."""
    topics = _load_array(text.strip())
    if topics is not None:
        return topics
    logger.warning("[TopicSuggester] Initial JSON parse failed, trying array extraction")

    start, end = text.find("["), text.rfind("]")
    if start != -1 and end > start:
        topics = _load_array(text[start : end + 1])
        if topics is not None:
            return topics
        logger.warning("[TopicSuggester] Array extraction failed")

    lines = [line.strip() for line in text.splitlines() if line.strip().startswith(('"', "[", "]"))]
    if lines:
        topics = _load_array(_TRAILING_COMMA_RE.sub("]", "".join(lines)))
        if topics is not None:
            return topics
        logger.warning("[TopicSuggester] Manual JSON reconstruction failed")

    questions: List[str] = []
    for quoted, bare in _QUESTION_RE.findall(text):
        question = (quoted or bare).strip()
        if question and question not in questions:
            questions.append(question)

    return questions or None


class TopicSuggester:
    def __init__(self, llm_service: GroqService, race_timeout: float = 12.0) -> None:
        self.llm_service = llm_service
        self.race_timeout = race_timeout

    async def suggest(self, query: Optional[str] = None) -> List[str]:
        """
        Raises:
            ProviderError: the model failed or lost the timeout race
            TopicParseError: no topics could be recovered from the reply
        """
        query = (query or "").strip()
        prompt = TRENDING_TOPICS_FOR_QUERY_PROMPT.format(query=query) if query else TRENDING_TOPICS_PROMPT

        try:
            text = await asyncio.wait_for(self.llm_service.generate(prompt), timeout=self.race_timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"[TopicSuggester] Model call lost the {self.race_timeout:.0f}s race")
            raise ProviderTimeoutError(f"Request timed out after {self.race_timeout:.0f} seconds") from e

        topics = parse_topics(text)
        if topics is None:
            logger.error(f"[TopicSuggester] Failed to parse AI response: {text[:RAW_RESPONSE_LOG_CHARS]!r}")
            raise TopicParseError(text)

        logger.info(f"[TopicSuggester] Suggested {len(topics)} topics (query={query or None!r})")
        return topics
