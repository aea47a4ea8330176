import re
from typing import Dict, List, Sequence, Tuple

from factcheck.core.schemas import Source
from factcheck.services.verdict.response_parser import RawSource

_CITATION_RE = re.compile(r"\[(\d+)\]")


def remap_citations(explanation: str, raw_sources: Sequence[RawSource]) -> Tuple[str, List[Source]]:
    """
    Re-index cited sources sequentially from 1 and rewrite ``[N]`` markers.

    Sources are numbered in order of first appearance of their model-supplied
    index; sources without an index, or repeating one already seen, are
    dropped. Markers pointing at an index no source carried are left as-is.

    Returns:
        (rewritten explanation, sources sorted by their new index)
    """
    if not raw_sources:
        return explanation, []

    mapping: Dict[int, int] = {}
    sources: List[Source] = []

    for raw in raw_sources:
        if raw.index is None or raw.index in mapping:
            continue
        new_index = len(mapping) + 1
        mapping[raw.index] = new_index
        sources.append(Source(index=new_index, name=raw.name.strip(), url=raw.url.strip()))

    def _rewrite(match: "re.Match[str]") -> str:
        original = int(match.group(1))
        if original not in mapping:
            return match.group(0)
        return f"[{mapping[original]}]"

    rewritten = _CITATION_RE.sub(_rewrite, explanation)
    sources.sort(key=lambda source: source.index)
    return rewritten, sources
