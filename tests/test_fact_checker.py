import pytest

from factcheck.core.errors import ProviderConfigurationError, StatementValidationError, VerdictParseError
from factcheck.core.schemas import EvidenceBundle, Verdict
from factcheck.services.fact_checker import FactChecker, validate_statement
from factcheck.services.verdict.verdict_generator import VerdictGenerator


class StubPipeline:
    def __init__(self, bundle=None):  # noqa: ANN001
        self.bundle = bundle or EvidenceBundle()
        self.statements = []

    async def gather_evidence(self, statement):  # noqa: ANN001
        self.statements.append(statement)
        return self.bundle


def _generator_factory(llm, calls):  # noqa: ANN001
    def _factory():
        calls.append("built")
        return VerdictGenerator(llm)

    return _factory


@pytest.mark.parametrize("statement", [None, "", "ab", "   ab   "])
def test_validate_statement_rejects_short_input(statement):
    with pytest.raises(StatementValidationError):
        validate_statement(statement)


def test_validate_statement_trims():
    assert validate_statement("  Water boils at 100C  ") == "Water boils at 100C"


@pytest.mark.asyncio
async def test_short_statement_fails_before_any_work(fake_llm_factory):
    pipeline = StubPipeline()
    built = []
    checker = FactChecker(pipeline, _generator_factory(fake_llm_factory(), built))

    with pytest.raises(StatementValidationError) as excinfo:
        await checker.check_fact("ab")

    assert "at least 3 characters" in excinfo.value.message
    assert pipeline.statements == []
    assert built == []


@pytest.mark.asyncio
async def test_missing_provider_key_surfaces_after_validation():
    pipeline = StubPipeline()

    def _factory():
        raise ProviderConfigurationError()

    checker = FactChecker(pipeline, _factory)

    with pytest.raises(StatementValidationError):
        await checker.check_fact("no")
    with pytest.raises(ProviderConfigurationError):
        await checker.check_fact("The Earth orbits the Sun")

    assert pipeline.statements == []


@pytest.mark.asyncio
async def test_check_fact_with_evidence(fake_llm_factory, sample_evidence):
    llm = fake_llm_factory(
        reply='{"verdict": "FALSE", "explanation": "Not visible [2].", '
        '"sources": [{"index": 2, "name": "Myths", "url": "https://myths.example.org/space"}], '
        '"confidence": 0.85}'
    )
    pipeline = StubPipeline(sample_evidence)
    built = []
    checker = FactChecker(pipeline, _generator_factory(llm, built))

    record = await checker.check_fact("  The Great Wall is visible from space  ")

    assert pipeline.statements == ["The Great Wall is visible from space"]
    assert record.verdict is Verdict.FALSE
    assert record.explanation == "Not visible [1]."
    assert [(s.index, s.url) for s in record.sources] == [(1, "https://myths.example.org/space")]
    assert record.used_web_scraping is True
    assert "The Great Wall is visible from space" in llm.calls[0].prompt


@pytest.mark.asyncio
async def test_check_fact_reuses_generator_across_requests(fake_llm_factory):
    llm = fake_llm_factory(reply='{"verdict": "TRUE", "explanation": "Yes.", "sources": [], "confidence": 1}')
    built = []
    checker = FactChecker(StubPipeline(), _generator_factory(llm, built))

    first = await checker.check_fact("Water is wet")
    second = await checker.check_fact("Fire is hot")

    assert first.used_web_scraping is False
    assert second.verdict is Verdict.TRUE
    assert built == ["built"]


@pytest.mark.asyncio
async def test_check_fact_propagates_parse_failures(fake_llm_factory):
    checker = FactChecker(StubPipeline(), _generator_factory(fake_llm_factory(reply="no idea"), []))

    with pytest.raises(VerdictParseError) as excinfo:
        await checker.check_fact("Cats can fly")

    assert excinfo.value.raw_text == "no idea"
