from typing import Callable, Optional

from factcheck.constants.config import MIN_STATEMENT_LENGTH
from factcheck.core.config import Settings, settings
from factcheck.core.errors import StatementValidationError
from factcheck.core.logger import get_logger
from factcheck.core.schemas import VerdictRecord
from factcheck.services.evidence.pipeline import EvidencePipeline
from factcheck.services.llms.groq_service import GroqService
from factcheck.services.verdict.verdict_generator import VerdictGenerator

logger = get_logger(__name__)


def validate_statement(statement: Optional[str]) -> str:
    """Return the trimmed statement or raise when it is too short to check."""
    trimmed = (statement or "").strip()
    if len(trimmed) < MIN_STATEMENT_LENGTH:
        raise StatementValidationError()
    return trimmed


class FactChecker:
    """
    Entry point for one fact-check request: validate → gather evidence → synthesize.

    The verdict generator is built lazily so a missing provider key surfaces
    only after the statement has been validated.
    """

    def __init__(
        self,
        evidence_pipeline: EvidencePipeline,
        verdict_generator_factory: Callable[[], VerdictGenerator],
    ) -> None:
        self.evidence_pipeline = evidence_pipeline
        self._verdict_generator_factory = verdict_generator_factory
        self._verdict_generator: Optional[VerdictGenerator] = None

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "FactChecker":
        config = config or settings

        def _factory() -> VerdictGenerator:
            return VerdictGenerator(
                GroqService(),
                use_response_schema=config.LLM_USE_RESPONSE_SCHEMA,
                race_timeout=config.MODEL_RACE_TIMEOUT_SECONDS,
            )

        return cls(EvidencePipeline.from_settings(config), _factory)

    @property
    def verdict_generator(self) -> VerdictGenerator:
        if self._verdict_generator is None:
            self._verdict_generator = self._verdict_generator_factory()
        return self._verdict_generator

    async def check_fact(self, statement: Optional[str]) -> VerdictRecord:
        trimmed = validate_statement(statement)
        generator = self.verdict_generator

        evidence = await self.evidence_pipeline.gather_evidence(trimmed)
        logger.info(
            f"[FactChecker] Evidence gathered: {len(evidence.search_results)} results, "
            f"{len(evidence.content_details)} pages"
        )

        return await generator.synthesize(trimmed, evidence)
