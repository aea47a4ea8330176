"""
Evidence-backed fact checking: web search aggregation, page scraping and LLM verdict synthesis.
"""

__version__ = "1.0.0"
