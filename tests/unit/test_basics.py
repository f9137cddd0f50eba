from time import sleep

from population_window import config
from population_window.orchestrator import available_strategies
from population_window.samples import CONTROLLED_PEOPLE, random_people
from population_window.utils import profiler

SAMPLE_COUNT = 100


def test_get_settings_defaults(monkeypatch):
    for name in ("POPULATION_START_YEAR", "POPULATION_END_YEAR", "SAMPLE_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = config.get_settings()
    assert settings.start_year == 1900
    assert settings.end_year == 2000
    assert settings.max_span_years > 0
    assert settings.sample_size == SAMPLE_COUNT
    assert settings.benchmark_runs >= 1


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("POPULATION_START_YEAR", "1800")
    monkeypatch.setenv("POPULATION_END_YEAR", "1850")
    monkeypatch.setenv("SAMPLE_SEED", "9")
    settings = config.get_settings()
    assert settings.start_year == 1800
    assert settings.end_year == 1850
    assert settings.sample_seed == 9


def test_profile_block_measures_time():
    with profiler.profile_block("sleep") as stats:
        sleep(0.05)
    assert stats.duration_seconds >= 0.05
    assert stats.peak_rss_bytes is None or stats.peak_rss_bytes > 0
    assert isinstance(stats.cpu_percent, float)


def test_available_strategies_contains_known_entries():
    names = available_strategies()
    assert names == ["delta", "naive"]


def test_controlled_people_fixture_shape():
    assert len(CONTROLLED_PEOPLE) == 13
    assert sum(1 for p in CONTROLLED_PEOPLE if p.death_year is None) == 1


def test_random_people_are_seeded_and_in_window():
    first = random_people(SAMPLE_COUNT, 1900, 2000, seed=123)
    second = random_people(SAMPLE_COUNT, 1900, 2000, seed=123)

    assert first == second
    assert len(first) == SAMPLE_COUNT
    for person in first:
        assert 1900 <= person.birth_year <= person.death_year <= 2000
