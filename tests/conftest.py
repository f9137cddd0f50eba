"""
Pytest configuration for the population window tests.

Provides fixtures for:
- The controlled sample and seeded random samples
- Settings isolation (the cached settings are cleared around every test)
"""

from __future__ import annotations

from typing import Generator, List

import pytest

from population_window.config import get_settings
from population_window.domain.models import PersonRecord
from population_window.samples import CONTROLLED_PEOPLE, random_people

START_YEAR = 1900
END_YEAR = 2000


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """
    Clear the cached Settings so monkeypatched env vars take effect.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def controlled_people() -> List[PersonRecord]:
    return list(CONTROLLED_PEOPLE)


@pytest.fixture
def random_sample() -> List[PersonRecord]:
    """Deterministic random sample over the default window."""
    return random_people(250, START_YEAR, END_YEAR, seed=123)
