"""
Sample people for the demo harness, the benchmark and the tests.

`CONTROLLED_PEOPLE` is a fixed list mixing valid records with one missing
death year, one born before 1900 and one with death before birth.
`random_people` draws seeded pseudo-random lifespans inside a window.
"""

from __future__ import annotations

import random
from typing import List, Optional

from population_window.domain.models import PersonRecord

CONTROLLED_PEOPLE: tuple[PersonRecord, ...] = (
    PersonRecord(birth_year=1900, death_year=1962),
    PersonRecord(birth_year=1903, death_year=1962),
    PersonRecord(birth_year=1922, death_year=1947),
    PersonRecord(birth_year=1972, death_year=1962),
    PersonRecord(birth_year=1899, death_year=1962),
    PersonRecord(birth_year=1900),
    PersonRecord(birth_year=1922, death_year=1958),
    PersonRecord(birth_year=1945, death_year=1969),
    PersonRecord(birth_year=1972, death_year=1980),
    PersonRecord(birth_year=1973, death_year=1980),
    PersonRecord(birth_year=1973, death_year=1980),
    PersonRecord(birth_year=1977, death_year=1980),
    PersonRecord(birth_year=1978, death_year=1980),
)


def random_people(
    count: int,
    start_year: int = 1900,
    end_year: int = 2000,
    seed: Optional[int] = None,
) -> List[PersonRecord]:
    """
    Generate ``count`` people with both years drawn uniformly from the window.

    The earlier of the two draws becomes the birth year, so every record is
    eligible for ``[start_year, end_year]``.
    """
    rng = random.Random(seed)
    people: List[PersonRecord] = []
    for _ in range(count):
        first = rng.randint(start_year, end_year)
        second = rng.randint(start_year, end_year)
        people.append(PersonRecord(birth_year=min(first, second), death_year=max(first, second)))
    return people


__all__ = ["CONTROLLED_PEOPLE", "random_people"]
