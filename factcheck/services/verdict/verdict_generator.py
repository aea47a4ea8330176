"""
Verdict Generator - synthesis phase

Takes the gathered evidence and produces the final verdict with the LLM:
    - builds an evidence-grounded prompt (or a general-knowledge prompt when
      no evidence could be gathered)
    - runs the model; without evidence the call is raced against an outer timeout
    - parses the reply through the fallback chain
    - re-indexes citations so sources are numbered 1..n in citation order
"""

import asyncio
from typing import Optional

from factcheck.constants.config import RAW_RESPONSE_LOG_CHARS
from factcheck.constants.llm_prompts import VERDICT_RESPONSE_SCHEMA
from factcheck.core.errors import ProviderTimeoutError, VerdictParseError
from factcheck.core.logger import get_logger
from factcheck.core.schemas import EvidenceBundle, VerdictRecord
from factcheck.services.llms.groq_service import GroqService
from factcheck.services.verdict.citations import remap_citations
from factcheck.services.verdict.prompt_builder import build_verdict_prompt
from factcheck.services.verdict.response_parser import FailedParse, parse_verdict_response

logger = get_logger(__name__)


class VerdictGenerator:
    def __init__(
        self,
        llm_service: GroqService,
        use_response_schema: bool = True,
        race_timeout: Optional[float] = 12.0,
    ) -> None:
        self.llm_service = llm_service
        self.use_response_schema = use_response_schema
        self.race_timeout = race_timeout

    async def _invoke(self, prompt: str, raced: bool) -> str:
        schema = VERDICT_RESPONSE_SCHEMA if self.use_response_schema else None
        call = self.llm_service.generate(prompt, schema=schema)

        if not raced or self.race_timeout is None:
            return await call

        try:
            # wait_for cancels the pending call when the race is lost
            return await asyncio.wait_for(call, timeout=self.race_timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"[VerdictGenerator] Model call lost the {self.race_timeout:.0f}s race")
            raise ProviderTimeoutError(
                f"Request timed out after {self.race_timeout:.0f} seconds. "
                "The AI service might be experiencing high load."
            ) from e

    async def synthesize(self, statement: str, evidence: EvidenceBundle) -> VerdictRecord:
        """
        Generate a verdict for the statement.

        Raises:
            ProviderError: the model call failed (auth, rate limit, timeout, other)
            VerdictParseError: no parsing strategy understood the reply
        """
        used_web_scraping = not evidence.is_empty
        prompt = build_verdict_prompt(statement, evidence)

        logger.info(
            f"[VerdictGenerator] Requesting verdict (evidence: {len(evidence.search_results)} results, "
            f"{len(evidence.content_details)} pages)"
        )
        text = await self._invoke(prompt, raced=not used_web_scraping)

        outcome = parse_verdict_response(text)
        if isinstance(outcome, FailedParse):
            logger.error(
                f"[VerdictGenerator] Failed to parse model response: {outcome.raw_text[:RAW_RESPONSE_LOG_CHARS]!r}"
            )
            raise VerdictParseError(outcome.raw_text)

        explanation, sources = remap_citations(outcome.explanation, outcome.sources)

        record = VerdictRecord(
            verdict=outcome.verdict,
            explanation=explanation,
            sources=sources,
            confidence=outcome.confidence,
            used_web_scraping=used_web_scraping,
        )
        logger.info(
            f"[VerdictGenerator] Generated verdict: {record.verdict.value} "
            f"(confidence: {record.confidence:.2f}, sources: {len(record.sources)}, via {outcome.strategy})"
        )
        return record
