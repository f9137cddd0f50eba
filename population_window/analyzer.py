"""
Delta-array analysis of the years with the largest population.

Each eligible person adds +1 at their birth year and -1 at their death year in
a zero-filled array covering the query window. A prefix sum over that array
yields the population per year, and a single scan collects every year tied at
the maximum.

Usage:
    from population_window.analyzer import analyze
    from population_window.domain import PersonRecord

    result = analyze(1900, 2000, [PersonRecord(birth_year=1950, death_year=1960)])
    result.peak_years  # (1950, ..., 1959)

A person is counted as alive during ``[birth_year, death_year)``: the death
year is the first year that no longer includes them. People born before the
window or dying after it are left out entirely, so populations near the
window edges are understated.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from population_window.diagnostics import DiagnosticSink, cumulative_population
from population_window.domain.models import AnalysisResult, PersonRecord
from population_window.utils.logging import get_logger

log = get_logger(__name__)


class SpanTooLargeError(ValueError):
    """Raised when a query window exceeds the configured maximum span."""

    def __init__(self, span: int, max_span: int) -> None:
        super().__init__(f"Year span {span} exceeds the maximum of {max_span} years")
        self.span = span
        self.max_span = max_span


def analyze(
    start_year: int,
    end_year: int,
    people: Sequence[PersonRecord],
    sink: Optional[DiagnosticSink] = None,
    max_span: Optional[int] = None,
) -> AnalysisResult:
    """
    Find the years inside ``[start_year, end_year]`` with the largest population.

    Parameters
    ----------
    start_year, end_year : int
        Inclusive bounds of the query window.
    people : Sequence[PersonRecord]
        Records to analyze. Ineligible records are skipped, never rejected.
    sink : DiagnosticSink, optional
        Receives the delta and cumulative arrays. Has no effect on the result.
    max_span : int, optional
        Upper bound on ``end_year - start_year + 1``. No bound when None.

    Returns
    -------
    AnalysisResult
        Counts, the maximum population and the ascending peak years. An
        inverted window or a window where nobody was alive yields a zeroed
        result with no peak years.

    Raises
    ------
    SpanTooLargeError
        Only when ``max_span`` is given and the window is wider.
    """
    submitted = len(people)
    if end_year < start_year:
        return AnalysisResult.empty(submitted)

    span = end_year - start_year + 1
    if max_span is not None and span > max_span:
        raise SpanTooLargeError(span, max_span)

    deltas = [0] * span
    recorded = 0
    for person in people:
        if not person.is_eligible(start_year, end_year):
            continue
        deltas[person.birth_year - start_year] += 1
        deltas[person.death_year - start_year] -= 1
        recorded += 1

    # Sinks that report themselves disabled skip the cumulative pass.
    if sink is not None and getattr(sink, "enabled", True):
        sink.record(start_year, deltas, cumulative_population(deltas))

    peak_years: List[int] = []
    max_population = 0
    total_population = 0
    for index, delta in enumerate(deltas):
        total_population += delta
        if total_population > max_population:
            peak_years = [start_year + index]
            max_population = total_population
        elif total_population == max_population:
            peak_years.append(start_year + index)

    # Nobody alive in any year: no year stands out.
    if max_population == 0:
        peak_years = []

    log.debug(
        "Population window analyzed",
        extra={
            "start_year": start_year,
            "end_year": end_year,
            "submitted": submitted,
            "recorded": recorded,
            "max_population": max_population,
        },
    )
    return AnalysisResult(
        samples_submitted=submitted,
        samples_recorded=recorded,
        max_population=max_population,
        peak_years=tuple(peak_years),
    )


class PopulationWindowAnalyzer:
    """
    Reusable analyzer bound to a diagnostic sink and an optional span bound.
    """

    def __init__(
        self,
        sink: Optional[DiagnosticSink] = None,
        max_span: Optional[int] = None,
    ) -> None:
        self.sink = sink
        self.max_span = max_span

    def analyze(
        self, start_year: int, end_year: int, people: Sequence[PersonRecord]
    ) -> AnalysisResult:
        return analyze(start_year, end_year, people, sink=self.sink, max_span=self.max_span)


__all__ = ["PopulationWindowAnalyzer", "SpanTooLargeError", "analyze"]
