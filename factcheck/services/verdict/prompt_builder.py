from typing import Dict, List

from factcheck.constants.llm_prompts import (
    VERDICT_GENERAL_KNOWLEDGE_PROMPT,
    VERDICT_RESPONSE_FORMAT,
    VERDICT_WITH_EVIDENCE_PROMPT,
)
from factcheck.core.schemas import EvidenceBundle


def format_evidence_block(evidence: EvidenceBundle) -> str:
    """
    Number the evidence for citation: search snippets first, then extracted
    page content. Page content reuses the number of the search result it was
    fetched from so one ``[n]`` always means one source.
    """
    numbers: Dict[str, int] = {}
    lines: List[str] = []

    if evidence.search_results:
        lines.append("SEARCH RESULTS:")
        for number, result in enumerate(evidence.search_results, start=1):
            numbers.setdefault(result.url, number)
            lines.append(
                f"[{number}] {result.title or 'Untitled'}\n"
                f"    URL: {result.url}\n"
                f"    Snippet: {result.snippet or 'N/A'}"
            )

    if evidence.content_details:
        lines.append("")
        lines.append("EXTRACTED PAGE CONTENT:")
        next_number = len(evidence.search_results) + 1
        for detail in evidence.content_details:
            number = numbers.get(detail.url)
            if number is None:
                number = numbers[detail.url] = next_number
                next_number += 1
            updated = detail.last_updated.date().isoformat() if detail.last_updated else "unknown"
            lines.append(
                f"[{number}] {detail.title or 'Untitled'} ({detail.url})\n"
                f"    Last updated: {updated}\n"
                f"    Content: {detail.content or 'No content could be extracted.'}"
            )

    return "\n".join(lines)


def build_verdict_prompt(statement: str, evidence: EvidenceBundle) -> str:
    if evidence.is_empty:
        return VERDICT_GENERAL_KNOWLEDGE_PROMPT.format(
            statement=statement,
            response_format=VERDICT_RESPONSE_FORMAT.format(),
        )

    return VERDICT_WITH_EVIDENCE_PROMPT.format(
        statement=statement,
        evidence_block=format_evidence_block(evidence),
        response_format=VERDICT_RESPONSE_FORMAT.format(),
    )
