"""
URL canonicalization and deduplication utilities.
"""

from typing import Iterable, List, Optional, TypeVar
from urllib.parse import parse_qs, urlparse

from factcheck.constants.config import REDIRECT_TARGET_PARAM
from factcheck.core.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def _ensure_scheme(url: str) -> str:
    if url.startswith("//"):
        return "https:" + url
    if not url.lower().startswith(("http://", "https://")):
        return "https://" + url
    return url


def is_redirect_wrapper(url: str) -> bool:
    """
    True for DuckDuckGo-style redirect links (``duckduckgo.com/l/?uddg=...``).
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return (
        parsed.netloc.lower().endswith("duckduckgo.com")
        and parsed.path.startswith("/l")
        and f"{REDIRECT_TARGET_PARAM}=" in parsed.query
    )


def unwrap_redirect(url: str) -> str:
    """
    Return the URL-decoded target carried by a redirect wrapper.

    A wrapper whose target cannot be decoded is returned untouched so the
    caller can still use it.
    """
    try:
        params = parse_qs(urlparse(url).query, errors="strict")
    except ValueError as e:
        logger.warning(f"[URLHelpers] Could not decode redirect target from {url}: {e}")
        return url

    values = params.get(REDIRECT_TARGET_PARAM, [])
    target = values[0].strip() if values else ""
    if not target:
        logger.warning(f"[URLHelpers] Redirect wrapper without a target: {url}")
        return url

    return _ensure_scheme(target)


def normalize_href(href: Optional[str]) -> Optional[str]:
    """
    Canonicalize a raw href scraped from a search results page.

    Rules, in order:
        1. empty input → None
        2. protocol-relative ``//host/...`` → ``https://host/...``
        3. missing scheme → ``https://`` prepended
        4. redirect wrapper carrying ``uddg`` → decoded target

    Root-relative links (``/search?...``) and anything that ends up without
    a host resolve to None.

    Args:
        href: Raw href attribute value

    Returns:
        Absolute URL, or None when there is nothing to normalize
    """
    if not href or not href.strip():
        return None

    href = href.strip()
    if href.startswith("/") and not href.startswith("//"):
        return None

    url = _ensure_scheme(href)

    if is_redirect_wrapper(url):
        url = unwrap_redirect(url)

    try:
        host = urlparse(url).netloc
    except ValueError:
        return None
    return url if host else None


def dedup_by_url(items: Iterable[T], key: str = "url") -> List[T]:
    """
    Stable-order deduplication by canonical URL.

    Keeps the first occurrence of every URL; items without a URL are dropped.

    Args:
        items: Objects exposing a URL attribute
        key: Attribute holding the canonical URL

    Returns:
        Deduplicated list in original order
    """
    seen = set()
    result: List[T] = []

    for item in items:
        url = getattr(item, key, None)
        if not url or url in seen:
            continue
        seen.add(url)
        result.append(item)

    return result
