"""
Naive (reference) strategy: count the living for every year of the window.

Runs in O(people * years). Kept as a baseline and as an independent check on
the delta array; it applies the same eligibility rule, the same half-open
lifespan ``[birth_year, death_year)`` and the same tie handling.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from population_window.analyzer import SpanTooLargeError
from population_window.domain.models import AnalysisResult, PersonRecord
from population_window.strategies.abstract import AbstractPopulationStrategy


class NaiveStrategy(AbstractPopulationStrategy):
    """
    Scan every year and count the eligible people alive in it.

    WARNING: quadratic in practice. Use small samples or narrow windows.
    """

    name: str = "naive"
    description: str = "Per-year head count over all eligible people (no delta array)."

    def __init__(self, max_span: Optional[int] = None) -> None:
        self._max_span = max_span

    def execute(
        self, start_year: int, end_year: int, people: Sequence[PersonRecord]
    ) -> AnalysisResult:
        if end_year < start_year:
            return AnalysisResult.empty(len(people))

        span = end_year - start_year + 1
        if self._max_span is not None and span > self._max_span:
            raise SpanTooLargeError(span, self._max_span)

        eligible = [p for p in people if p.is_eligible(start_year, end_year)]

        counts = [
            sum(1 for p in eligible if p.birth_year <= year < p.death_year)
            for year in range(start_year, end_year + 1)
        ]
        max_population = max(counts)
        peak_years: List[int] = []
        if max_population > 0:
            peak_years = [
                start_year + index
                for index, count in enumerate(counts)
                if count == max_population
            ]

        return AnalysisResult(
            samples_submitted=len(people),
            samples_recorded=len(eligible),
            max_population=max_population,
            peak_years=tuple(peak_years),
        )
