"""
Delta-array strategy: the production algorithm.

One pass over the people to mark births and deaths, one prefix-sum pass over
the window. Runs in O(people + years).
"""

from __future__ import annotations

from typing import Optional, Sequence

from population_window.analyzer import PopulationWindowAnalyzer
from population_window.diagnostics import DiagnosticSink
from population_window.domain.models import AnalysisResult, PersonRecord
from population_window.strategies.abstract import AbstractPopulationStrategy


class DeltaArrayStrategy(AbstractPopulationStrategy):
    """Thin adapter exposing `PopulationWindowAnalyzer` as a strategy."""

    name: str = "delta"
    description: str = "Difference array of births/deaths folded by a prefix sum."

    def __init__(
        self, sink: Optional[DiagnosticSink] = None, max_span: Optional[int] = None
    ) -> None:
        self._analyzer = PopulationWindowAnalyzer(sink=sink, max_span=max_span)

    def execute(
        self, start_year: int, end_year: int, people: Sequence[PersonRecord]
    ) -> AnalysisResult:
        return self._analyzer.analyze(start_year, end_year, people)
