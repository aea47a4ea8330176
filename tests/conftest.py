"""
Pytest configuration and fixtures for test suite.

This module:
- Detects CI environment and skips tests requiring external services
- Provides common fixtures for evidence and fake LLM tests
"""

import asyncio
import os
from types import SimpleNamespace
from typing import List, Optional

import pytest

from factcheck.core.schemas import ContentDetail, EvidenceBundle, SearchEngine, SearchResult

# Detect CI environment
IS_CI = os.environ.get("CI") or os.environ.get("GITHUB_ACTIONS") or os.environ.get("GITLAB_CI")


def is_groq_available():
    """Check if Groq API key is configured."""
    return bool(os.environ.get("GROQ_API_KEY"))


# Pytest markers for skipping
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "groq_required: mark test as requiring Groq API")
    config.addinivalue_line("markers", "integration: mark test as integration test (hits live search surfaces)")


def pytest_collection_modifyitems(config, items):
    """Automatically skip tests based on environment."""
    for item in items:
        # Skip tests requiring Groq if not configured
        if "groq_required" in item.keywords:
            if not is_groq_available():
                item.add_marker(pytest.mark.skip(reason="Groq API key not configured"))

        # Skip integration tests unless explicitly enabled
        if "integration" in item.keywords:
            if IS_CI or not os.environ.get("RUN_INTEGRATION_TESTS"):
                item.add_marker(pytest.mark.skip(reason="Integration tests need RUN_INTEGRATION_TESTS=1"))


class FakeLLM:
    """Records prompts and replays canned replies (or raises a canned error)."""

    def __init__(self, reply: str = "", error: Optional[Exception] = None, delay: float = 0.0) -> None:
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls: List[SimpleNamespace] = []

    async def generate(self, prompt, schema=None):  # noqa: ANN001
        self.calls.append(SimpleNamespace(prompt=prompt, schema=schema))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_llm_factory():
    return FakeLLM


@pytest.fixture
def sample_evidence():
    results = [
        SearchResult(
            title="Great Wall visibility",
            url="https://example.com/great-wall",
            snippet="The Great Wall is not visible to the naked eye from space.",
            source=SearchEngine.GOOGLE,
        ),
        SearchResult(
            title="Space myths",
            url="https://myths.example.org/space",
            snippet="Astronauts report the wall is hard to see.",
            source=SearchEngine.DUCKDUCKGO,
        ),
    ]
    details = [
        ContentDetail(
            **results[0].model_dump(),
            content="NASA astronauts confirm the wall cannot be seen unaided from low orbit.",
        )
    ]
    return EvidenceBundle(search_results=results, content_details=details)
