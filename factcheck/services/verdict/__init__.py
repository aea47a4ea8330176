"""
Verdict services: prompt construction, reply parsing and citation re-indexing.
"""

from factcheck.services.verdict.verdict_generator import VerdictGenerator

__all__ = ["VerdictGenerator"]
