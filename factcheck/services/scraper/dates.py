"""
Best-effort "last updated" detection for scraped pages.
"""

import json
import re
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

from bs4 import BeautifulSoup
from dateutil import parser as dateparser

from factcheck.constants.config import MODIFIED_META_ATTRS, UPDATED_LABEL_SELECTORS

_LABEL_PREFIX_RE = re.compile(r"^\s*(?:last\s+)?(?:updated|modified|reviewed)(?:\s+on)?\s*[:\-]?\s*", re.IGNORECASE)

# ISO (YYYY-MM-DD) or US slash form (MM/DD/YYYY)
_BODY_DATE_RE = re.compile(
    r"\b(?P<iy>\d{4})-(?P<im>\d{2})-(?P<id>\d{2})\b|\b(?P<um>\d{1,2})/(?P<ud>\d{1,2})/(?P<uy>\d{4})\b"
)


def to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """Parse a free-form date string; None when it is not a real date."""
    if not value or not value.strip():
        return None
    try:
        return to_utc(dateparser.parse(value.strip()))
    except (ValueError, OverflowError, TypeError):
        return None


def _json_ld_modified(node: Any) -> Iterator[str]:
    if isinstance(node, dict):
        value = node.get("dateModified")
        if isinstance(value, str):
            yield value
        for child in node.values():
            yield from _json_ld_modified(child)
    elif isinstance(node, list):
        for child in node:
            yield from _json_ld_modified(child)


def from_structured_metadata(soup: BeautifulSoup) -> Optional[datetime]:
    for attr, value in MODIFIED_META_ATTRS:
        tag = soup.find("meta", attrs={attr: re.compile(f"^{re.escape(value)}$", re.IGNORECASE)})
        if tag is None:
            continue
        parsed = parse_date(tag.get("content"))
        if parsed:
            return parsed

    for script in soup.find_all("script", attrs={"type": re.compile(r"ld\+json", re.IGNORECASE)}):
        raw = (script.string or script.get_text() or "").strip()
        if not raw:
            continue
        try:
            data = json.loads(raw)
        except ValueError:
            continue
        for candidate in _json_ld_modified(data):
            parsed = parse_date(candidate)
            if parsed:
                return parsed

    return None


def from_time_element(soup: BeautifulSoup) -> Optional[datetime]:
    for tag in soup.find_all("time"):
        parsed = parse_date(tag.get("datetime")) or parse_date(tag.get_text(" ", strip=True))
        if parsed:
            return parsed
    return None


def from_updated_label(soup: BeautifulSoup) -> Optional[datetime]:
    for selector in UPDATED_LABEL_SELECTORS:
        for tag in soup.select(selector):
            text = _LABEL_PREFIX_RE.sub("", tag.get_text(" ", strip=True))
            parsed = parse_date(text)
            if parsed:
                return parsed
    return None


def from_body_text(text: str) -> Optional[datetime]:
    """First ISO or slash-form date in visible text that is a valid calendar date."""
    for match in _BODY_DATE_RE.finditer(text or ""):
        try:
            if match.group("iy"):
                value = datetime(int(match.group("iy")), int(match.group("im")), int(match.group("id")))
            else:
                value = datetime(int(match.group("uy")), int(match.group("um")), int(match.group("ud")))
        except ValueError:
            continue
        return to_utc(value)
    return None


def extract_last_updated(soup: BeautifulSoup) -> Optional[datetime]:
    """
    Look for a modification date in priority order:
        1. structured metadata (meta tags, JSON-LD dateModified)
        2. a machine-readable <time> element
        3. a textual "updated"/"modified" label
    """
    return from_structured_metadata(soup) or from_time_element(soup) or from_updated_label(soup)
