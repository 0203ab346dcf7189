"""Deterministic pattern-based digest engine.

Public API:
    analyze(): parse text into a ContentAnalysis.
    summarize(): run the full pipeline and return a SummaryResult.
"""

from .analyzer import ContentAnalysis, analyze
from .modes import SummaryMode, generate_summary
from .pipeline import summarize

__all__ = ["ContentAnalysis", "SummaryMode", "analyze", "generate_summary", "summarize"]
