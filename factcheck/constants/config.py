"""
Application configuration constants.
Centralized settings for search surfaces, scraping selectors, and verdict defaults.
"""

# ============================================================================
# INPUT VALIDATION
# ============================================================================

# Statements shorter than this (after trimming) are rejected before any network work
MIN_STATEMENT_LENGTH = 3

# ============================================================================
# HTTP CLIENT SETTINGS
# ============================================================================

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

SEARCH_HEADERS = {
    "User-Agent": BROWSER_USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

PAGE_FETCH_HEADERS = {
    "User-Agent": BROWSER_USER_AGENT,
}

# ============================================================================
# SEARCH SURFACES
# ============================================================================

GOOGLE_SEARCH_URL = "https://www.google.com/search?q={query}&hl=en&num={num}"
DUCKDUCKGO_SEARCH_URL = "https://html.duckduckgo.com/html/?q={query}"

# Google result containers and fields
GOOGLE_RESULT_SELECTOR = "div.g"
GOOGLE_TITLE_SELECTOR = "h3"
GOOGLE_LINK_SELECTOR = "a[href]"
GOOGLE_SNIPPET_SELECTOR = "div.VwiC3b, span.aCOpRe, div.IsZvec, div[data-sncf]"

# DuckDuckGo (HTML endpoint) result containers and fields
DUCKDUCKGO_RESULT_SELECTOR = ".result"
DUCKDUCKGO_TITLE_SELECTOR = ".result__title"
DUCKDUCKGO_LINK_SELECTOR = ".result__title a"
DUCKDUCKGO_SNIPPET_SELECTOR = ".result__snippet"

# Query parameter carrying the real target inside DuckDuckGo redirect links
REDIRECT_TARGET_PARAM = "uddg"

# Lower-cased markers of CAPTCHA / consent interstitials (diagnostic only)
INTERSTITIAL_MARKERS = (
    "captcha",
    "unusual traffic",
    "not a robot",
    "consent.google.com",
    "before you continue",
    "anomaly-modal",
)

# ============================================================================
# CONTENT EXTRACTION
# ============================================================================

# Elements removed before reading text off a page
BOILERPLATE_TAGS = ("script", "style", "nav", "footer", "header", "aside")

# Candidate main-content containers, in priority order
MAIN_CONTENT_SELECTORS = ("main", "article", ".content", "#content", ".main", "#main")

# A container must carry more than this many characters to be used as main content
MAIN_CONTENT_MIN_CHARS = 100

# Structured metadata carrying a modification date, in priority order
MODIFIED_META_ATTRS = (
    ("property", "article:modified_time"),
    ("property", "og:updated_time"),
    ("itemprop", "dateModified"),
    ("name", "last-modified"),
    ("name", "dcterms.modified"),
    ("http-equiv", "last-modified"),
)

# Elements commonly holding a human readable "updated" label
UPDATED_LABEL_SELECTORS = (
    ".last-updated",
    ".updated",
    ".date-modified",
    ".modified",
    ".post-modified",
)

# ============================================================================
# VERDICT DEFAULTS
# ============================================================================

DEFAULT_CONFIDENCE = 0.5
PLACEHOLDER_EXPLANATION = "The AI analyzed the statement but didn't provide a detailed explanation."

# Characters of raw model text echoed into logs on parse failures
RAW_RESPONSE_LOG_CHARS = 500
