"""
Common utilities shared across search and scraping modules.

Modules:
    - url_helpers: URL canonicalization and deduplication
    - http: Explicit HTTP client configuration
"""
