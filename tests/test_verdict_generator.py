import pytest

from factcheck.constants.llm_prompts import VERDICT_RESPONSE_SCHEMA
from factcheck.core.errors import ProviderRateLimitError, ProviderTimeoutError, VerdictParseError
from factcheck.core.schemas import EvidenceBundle, Source, Verdict
from factcheck.services.verdict.prompt_builder import build_verdict_prompt, format_evidence_block
from factcheck.services.verdict.verdict_generator import VerdictGenerator

EMBEDDED_REPLY = (
    'Sure! {"verdict":"TRUE","explanation":"Confirmed [1].",'
    '"sources":[{"index":7,"name":"X","url":"https://x"}],"confidence":0.9}'
)


def test_evidence_block_numbers_snippets_then_content(sample_evidence):
    block = format_evidence_block(sample_evidence)

    assert block.index("SEARCH RESULTS:") < block.index("EXTRACTED PAGE CONTENT:")
    assert "[1] Great Wall visibility" in block
    assert "[2] Space myths" in block
    # page content reuses the number of the result it came from
    assert "[1] Great Wall visibility (https://example.com/great-wall)" in block
    assert "Last updated: unknown" in block


def test_prompt_without_evidence_omits_evidence_block():
    prompt = build_verdict_prompt("The moon is made of cheese", EvidenceBundle())

    assert "The moon is made of cheese" in prompt
    assert "general knowledge" in prompt
    assert "SEARCH RESULTS" not in prompt
    assert '"verdict"' in prompt


def test_prompt_with_evidence_requires_citations(sample_evidence):
    prompt = build_verdict_prompt("The Great Wall is visible from space", sample_evidence)

    assert "ONLY on the evidence" in prompt
    assert "[1]" in prompt
    assert "https://myths.example.org/space" in prompt


@pytest.mark.asyncio
async def test_synthesize_recovers_embedded_json_and_remaps_sources(fake_llm_factory, sample_evidence):
    llm = fake_llm_factory(reply=EMBEDDED_REPLY)

    record = await VerdictGenerator(llm).synthesize("The Great Wall is visible from space", sample_evidence)

    assert record.verdict is Verdict.TRUE
    assert record.sources == [Source(index=1, name="X", url="https://x")]
    assert record.explanation == "Confirmed [1]."
    assert record.confidence == 0.9
    assert record.used_web_scraping is True
    assert llm.calls[0].schema == VERDICT_RESPONSE_SCHEMA


@pytest.mark.asyncio
async def test_synthesize_without_evidence_marks_no_web_scraping(fake_llm_factory):
    llm = fake_llm_factory(reply='{"verdict": "FALSE", "explanation": "No.", "sources": [], "confidence": 0.8}')

    record = await VerdictGenerator(llm, use_response_schema=False).synthesize("Cheese moon", EvidenceBundle())

    assert record.verdict is Verdict.FALSE
    assert record.used_web_scraping is False
    assert record.sources == []
    assert "SEARCH RESULTS" not in llm.calls[0].prompt
    assert llm.calls[0].schema is None


@pytest.mark.asyncio
async def test_synthesize_raises_parse_error_with_raw_text(fake_llm_factory, sample_evidence):
    raw = "I cannot evaluate this statement."
    llm = fake_llm_factory(reply=raw)

    with pytest.raises(VerdictParseError) as excinfo:
        await VerdictGenerator(llm).synthesize("statement", sample_evidence)

    assert excinfo.value.raw_text == raw


@pytest.mark.asyncio
async def test_synthesize_without_evidence_loses_race_with_timeout_error(fake_llm_factory):
    llm = fake_llm_factory(reply='{"verdict": "TRUE"}', delay=1.0)

    with pytest.raises(ProviderTimeoutError):
        await VerdictGenerator(llm, race_timeout=0.05).synthesize("slow statement", EvidenceBundle())


@pytest.mark.asyncio
async def test_synthesize_with_evidence_is_not_raced(fake_llm_factory, sample_evidence):
    llm = fake_llm_factory(reply='{"verdict": "TRUE", "explanation": "ok", "sources": []}', delay=0.1)

    record = await VerdictGenerator(llm, race_timeout=0.01).synthesize("statement", sample_evidence)

    assert record.verdict is Verdict.TRUE


@pytest.mark.asyncio
async def test_synthesize_propagates_provider_errors(fake_llm_factory, sample_evidence):
    llm = fake_llm_factory(error=ProviderRateLimitError())

    with pytest.raises(ProviderRateLimitError):
        await VerdictGenerator(llm).synthesize("statement", sample_evidence)
