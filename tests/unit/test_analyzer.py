"""
Unit tests for the delta-array population analysis.
"""

from __future__ import annotations

import pytest

from population_window.analyzer import PopulationWindowAnalyzer, SpanTooLargeError, analyze
from population_window.domain.models import AnalysisResult, PersonRecord

START_YEAR = 1900
END_YEAR = 2000

# Controlled sample expectations
CONTROLLED_SUBMITTED = 13
CONTROLLED_RECORDED = 10
CONTROLLED_MAX_POPULATION = 5
CONTROLLED_PEAK_YEARS = (1945, 1946, 1978, 1979)


def _person(birth: int | None, death: int | None) -> PersonRecord:
    return PersonRecord(birth_year=birth, death_year=death)


class TestScenarios:
    def test_controlled_sample(self, controlled_people):
        result = analyze(START_YEAR, END_YEAR, controlled_people)

        assert result.samples_submitted == CONTROLLED_SUBMITTED
        assert result.samples_recorded == CONTROLLED_RECORDED
        assert result.max_population == CONTROLLED_MAX_POPULATION
        assert result.peak_years == CONTROLLED_PEAK_YEARS

    def test_controlled_sample_recorded_matches_eligibility(self, controlled_people):
        result = analyze(START_YEAR, END_YEAR, controlled_people)
        eligible = [
            p
            for p in controlled_people
            if p.birth_year is not None
            and p.death_year is not None
            and p.birth_year >= START_YEAR
            and p.death_year <= END_YEAR
            and p.death_year >= p.birth_year
        ]
        assert result.samples_recorded == len(eligible)

    def test_single_person_peaks_until_death_year(self):
        result = analyze(START_YEAR, END_YEAR, [_person(1950, 1960)])

        assert result.samples_recorded == 1
        assert result.max_population == 1
        assert result.peak_years == tuple(range(1950, 1960))

    def test_disjoint_lifespans_give_separate_peak_runs(self):
        result = analyze(START_YEAR, END_YEAR, [_person(1900, 1910), _person(1920, 1930)])

        assert result.max_population == 1
        assert result.peak_years == tuple(range(1900, 1910)) + tuple(range(1920, 1930))

    def test_empty_people(self):
        result = analyze(START_YEAR, END_YEAR, [])

        assert result == AnalysisResult(
            samples_submitted=0, samples_recorded=0, max_population=0, peak_years=()
        )

    def test_higher_peak_resets_earlier_ties(self):
        people = [_person(1900, 1905), _person(1950, 1960), _person(1955, 1958)]
        result = analyze(START_YEAR, END_YEAR, people)

        assert result.max_population == 2
        assert result.peak_years == (1955, 1956, 1957)


class TestDegenerateInputs:
    def test_inverted_window_returns_zeroed_result(self, controlled_people):
        result = analyze(END_YEAR, START_YEAR, controlled_people)

        assert result.samples_submitted == len(controlled_people)
        assert result.samples_recorded == 0
        assert result.max_population == 0
        assert result.peak_years == ()

    def test_inverted_window_ignores_span_bound(self):
        result = analyze(10, 0, [_person(1, 2)], max_span=1)
        assert result.samples_recorded == 0

    def test_missing_years_are_skipped(self):
        result = analyze(START_YEAR, END_YEAR, [_person(1950, None), _person(None, 1960), _person(None, None)])

        assert result.samples_submitted == 3
        assert result.samples_recorded == 0
        assert result.peak_years == ()

    def test_inverted_record_is_skipped(self):
        result = analyze(START_YEAR, END_YEAR, [_person(1972, 1962)])
        assert result.samples_recorded == 0

    def test_same_birth_and_death_year_never_extends_peaks(self):
        alone = analyze(START_YEAR, END_YEAR, [_person(1980, 1980)])
        assert alone.samples_recorded == 1
        assert alone.max_population == 0
        assert alone.peak_years == ()

        with_other = analyze(START_YEAR, END_YEAR, [_person(1950, 1960), _person(1980, 1980)])
        assert with_other.peak_years == tuple(range(1950, 1960))

    def test_year_zero_is_a_real_year(self):
        result = analyze(-10, 10, [_person(0, 5)])

        assert result.samples_recorded == 1
        assert result.peak_years == (0, 1, 2, 3, 4)


class TestWindowBoundaries:
    @pytest.mark.parametrize(
        "record",
        [(START_YEAR, START_YEAR + 5), (END_YEAR - 5, END_YEAR), (START_YEAR, END_YEAR)],
    )
    def test_records_touching_the_edges_are_included(self, record):
        result = analyze(START_YEAR, END_YEAR, [_person(*record)])
        assert result.samples_recorded == 1

    @pytest.mark.parametrize(
        "record",
        [(START_YEAR - 1, START_YEAR + 5), (END_YEAR - 5, END_YEAR + 1)],
    )
    def test_records_one_year_outside_are_excluded(self, record):
        result = analyze(START_YEAR, END_YEAR, [_person(*record)])
        assert result.samples_recorded == 0

    def test_death_year_is_not_counted(self):
        result = analyze(START_YEAR, END_YEAR, [_person(1950, 1951), _person(1951, 1952)])

        assert result.max_population == 1
        assert result.peak_years == (1950, 1951)

    def test_single_year_window(self):
        result = analyze(1950, 1950, [_person(1950, 1950)])

        assert result.samples_recorded == 1
        assert result.max_population == 0
        assert result.peak_years == ()


class TestProperties:
    def test_submitted_and_recorded_counts(self, random_sample, controlled_people):
        for people in (random_sample, controlled_people, []):
            result = analyze(START_YEAR, END_YEAR, people)
            assert result.samples_submitted == len(people)
            assert result.samples_recorded <= result.samples_submitted

    def test_idempotent(self, random_sample):
        assert analyze(START_YEAR, END_YEAR, random_sample) == analyze(
            START_YEAR, END_YEAR, random_sample
        )

    def test_input_order_does_not_change_result(self, random_sample):
        forward = analyze(START_YEAR, END_YEAR, random_sample)
        backward = analyze(START_YEAR, END_YEAR, list(reversed(random_sample)))
        assert forward == backward

    def test_peak_years_ascending_and_inside_window(self, random_sample):
        result = analyze(START_YEAR, END_YEAR, random_sample)

        assert list(result.peak_years) == sorted(result.peak_years)
        assert all(START_YEAR <= year <= END_YEAR for year in result.peak_years)

    def test_input_is_not_mutated(self, controlled_people):
        snapshot = list(controlled_people)
        analyze(START_YEAR, END_YEAR, controlled_people)
        assert controlled_people == snapshot


class TestSpanBound:
    def test_span_over_bound_raises(self):
        with pytest.raises(SpanTooLargeError) as excinfo:
            analyze(0, 1_000, [], max_span=1_000)

        assert excinfo.value.span == 1_001
        assert excinfo.value.max_span == 1_000
        assert isinstance(excinfo.value, ValueError)

    def test_span_at_bound_is_accepted(self):
        result = analyze(0, 999, [_person(10, 20)], max_span=1_000)
        assert result.max_population == 1


class _RecordingSink:
    def __init__(self) -> None:
        self.calls = []

    def record(self, start_year, deltas, population_by_year):
        self.calls.append((start_year, list(deltas), list(population_by_year)))


class TestAnalyzerClass:
    def test_sink_receives_deltas_and_cumulative_population(self):
        sink = _RecordingSink()
        analyzer = PopulationWindowAnalyzer(sink=sink)

        analyzer.analyze(2000, 2004, [_person(2000, 2003), _person(2001, 2004)])

        assert sink.calls == [(2000, [1, 1, 0, -1, -1], [1, 2, 2, 1, 0])]

    def test_sink_does_not_change_result(self, random_sample):
        with_sink = PopulationWindowAnalyzer(sink=_RecordingSink()).analyze(
            START_YEAR, END_YEAR, random_sample
        )
        assert with_sink == analyze(START_YEAR, END_YEAR, random_sample)

    def test_sink_not_called_for_inverted_window(self):
        sink = _RecordingSink()
        PopulationWindowAnalyzer(sink=sink).analyze(2000, 1900, [])
        assert sink.calls == []

    def test_max_span_is_applied(self):
        with pytest.raises(SpanTooLargeError):
            PopulationWindowAnalyzer(max_span=10).analyze(START_YEAR, END_YEAR, [])
