"""
Model reply parsing for verdict generation.

Strategies are tried in strict order and the first success wins:
    1. direct      - the whole reply is a JSON object
    2. embedded    - the first top-level {...} span inside surrounding prose
    3. manual      - regex extraction of verdict / explanation / sources / confidence
If none succeeds the outcome is a FailedParse carrying the raw reply.
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from factcheck.constants.config import DEFAULT_CONFIDENCE, PLACEHOLDER_EXPLANATION
from factcheck.core.logger import get_logger
from factcheck.core.schemas import Verdict

logger = get_logger(__name__)

# Known labels first (multi-word ones before their single-word tails), else one bare word
_VERDICT_RE = re.compile(
    r"verdict[\"'\s:]+"
    r"((?:PARTIALLY[ _\-]+TRUE|CONTEXT[ _\-]+NOT[ _\-]+CLEAR|TRUE|FALSE|UNKNOWN)\b|[A-Za-z_]+)",
    re.IGNORECASE,
)
_EXPLANATION_RE = re.compile(r"explanation[\"'\s:]+([^\"]+?)(?:,|\n|source)", re.IGNORECASE)
_SOURCE_RE = re.compile(
    r"(?:index[\"'\s:]+(\d+)[\"'\s,]+)?name[\"'\s:]+([^\"\n]+?)[\"'\s,]+url[\"'\s:]+([^\"'\s,}\]]+)",
    re.IGNORECASE,
)
_CONFIDENCE_RE = re.compile(r"confidence[\"'\s:]+([0-9]*\.?[0-9]+)", re.IGNORECASE)


@dataclass(frozen=True)
class RawSource:
    """A source exactly as the model cited it, before re-indexing."""

    index: Optional[int]
    name: str
    url: str


@dataclass(frozen=True)
class ParsedVerdict:
    verdict: Verdict
    explanation: str
    confidence: float
    sources: List[RawSource] = field(default_factory=list)
    strategy: str = "direct"


@dataclass(frozen=True)
class FailedParse:
    raw_text: str


ParseOutcome = Union[ParsedVerdict, FailedParse]


# ---------------------------------------------------------------------
# Field coercion
# ---------------------------------------------------------------------
def normalize_verdict(value: Any) -> Verdict:
    """Map free-form verdict text onto the enum; anything unrecognised is UNKNOWN."""
    if not isinstance(value, str):
        return Verdict.UNKNOWN
    token = re.sub(r"[\s\-]+", "_", value.strip().upper())
    try:
        return Verdict(token)
    except ValueError:
        return Verdict.UNKNOWN


def coerce_confidence(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return DEFAULT_CONFIDENCE
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        return DEFAULT_CONFIDENCE
    if confidence != confidence:  # NaN
        return DEFAULT_CONFIDENCE
    return min(1.0, max(0.0, confidence))


def _coerce_index(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _sources_from_json(value: Any) -> List[RawSource]:
    if not isinstance(value, list):
        return []
    sources = []
    for item in value:
        if not isinstance(item, Mapping):
            continue
        sources.append(
            RawSource(
                index=_coerce_index(item.get("index")),
                name=str(item.get("name") or "").strip(),
                url=str(item.get("url") or "").strip(),
            )
        )
    return sources


def _from_mapping(data: Mapping[str, Any], strategy: str) -> ParsedVerdict:
    explanation = data.get("explanation")
    if not isinstance(explanation, str) or not explanation.strip():
        explanation = PLACEHOLDER_EXPLANATION

    return ParsedVerdict(
        verdict=normalize_verdict(data.get("verdict", Verdict.UNKNOWN.value)),
        explanation=explanation.strip(),
        confidence=coerce_confidence(data.get("confidence", DEFAULT_CONFIDENCE)),
        sources=_sources_from_json(data.get("sources", [])),
        strategy=strategy,
    )


# ---------------------------------------------------------------------
# Strategy 1: direct JSON
# ---------------------------------------------------------------------
def parse_direct(text: str) -> Optional[ParsedVerdict]:
    try:
        data = json.loads(text.strip())
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    return _from_mapping(data, "direct")


# ---------------------------------------------------------------------
# Strategy 2: embedded JSON
# ---------------------------------------------------------------------
def find_json_object_span(text: str) -> Optional[str]:
    """
    Return the first top-level ``{...}`` span, matching braces outside string
    literals. An unbalanced tail falls back to the greedy first-``{`` to
    last-``}`` span.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for pos in range(start, len(text)):
        ch = text[pos]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start : pos + 1]

    end = text.rfind("}")
    return text[start : end + 1] if end > start else None


def parse_embedded(text: str) -> Optional[ParsedVerdict]:
    span = find_json_object_span(text)
    if span is None:
        return None
    try:
        data = json.loads(span)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    return _from_mapping(data, "embedded")


# ---------------------------------------------------------------------
# Strategy 3: manual field extraction
# ---------------------------------------------------------------------
def parse_manual(text: str) -> Optional[ParsedVerdict]:
    verdict_match = _VERDICT_RE.search(text)
    if not verdict_match:
        return None

    explanation_match = _EXPLANATION_RE.search(text)
    explanation = explanation_match.group(1).strip() if explanation_match else ""

    matches = [match.groups() for match in _SOURCE_RE.finditer(text)]
    # unindexed sources take their position unless an explicit index already claims it
    used = {int(index) for index, _, _ in matches if index}
    sources = []
    for position, (index, name, url) in enumerate(matches, start=1):
        if index:
            number = int(index)
        else:
            number = position
            while number in used:
                number += 1
            used.add(number)
        sources.append(RawSource(index=number, name=name.strip(), url=url.strip()))

    confidence_match = _CONFIDENCE_RE.search(text)

    return ParsedVerdict(
        verdict=normalize_verdict(verdict_match.group(1)),
        explanation=explanation or PLACEHOLDER_EXPLANATION,
        confidence=coerce_confidence(confidence_match.group(1)) if confidence_match else DEFAULT_CONFIDENCE,
        sources=sources,
        strategy="manual",
    )


def parse_verdict_response(text: str) -> ParseOutcome:
    """Run the fallback chain over a raw model reply."""
    for strategy in (parse_direct, parse_embedded, parse_manual):
        parsed = strategy(text or "")
        if parsed is not None:
            if parsed.strategy != "direct":
                logger.warning(f"[ResponseParser] Direct JSON parse failed, recovered via {parsed.strategy} parsing")
            return parsed
        logger.debug(f"[ResponseParser] {strategy.__name__} did not match")

    return FailedParse(raw_text=text or "")
