"""
Domain package for the population window analysis.

Exports the value types shared by the analyzer, strategies and reporting.
"""

from population_window.domain.models import AnalysisResult, PersonRecord

__all__ = [
    "AnalysisResult",
    "PersonRecord",
]
