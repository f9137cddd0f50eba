"""
Domain models for the population window analysis.

`PersonRecord` mirrors the input shape (`birthYear` / `deathYear`) so JSON
fixtures validate directly, and `AnalysisResult` is the immutable value
returned by every analysis strategy.
"""
from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, Field


class PersonRecord(BaseModel):
    """
    A single individual with optional birth and death years.
    """

    birth_year: Optional[int] = Field(None, alias="birthYear", description="Year of birth.")
    death_year: Optional[int] = Field(None, alias="deathYear", description="Year of death.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }

    def is_eligible(self, start_year: int, end_year: int) -> bool:
        """
        Whether the record can be counted inside ``[start_year, end_year]``.

        Both years must be known, not inverted, and fall inside the interval.
        People alive at a boundary but born or dying outside it are excluded.
        """
        if self.birth_year is None or self.death_year is None:
            return False
        if self.death_year < self.birth_year:
            return False
        return self.birth_year >= start_year and self.death_year <= end_year


class AnalysisResult(BaseModel):
    """
    Outcome of a single population window query.
    """

    samples_submitted: int = Field(0, alias="numSamplesSubmitted", ge=0)
    samples_recorded: int = Field(0, alias="numberOfSamplesRecorded", ge=0)
    max_population: int = Field(0, alias="maxPopulationRecorded", ge=0)
    peak_years: Tuple[int, ...] = Field((), alias="largestPopulationYears")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @classmethod
    def empty(cls, samples_submitted: int = 0) -> "AnalysisResult":
        """Zeroed result for degenerate queries."""
        return cls(samples_submitted=samples_submitted)


__all__ = ["AnalysisResult", "PersonRecord"]
