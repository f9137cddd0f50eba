"""
Strategy interfaces for computing the peak population years.

Every implementation returns the same `AnalysisResult` for the same input so
the orchestrator can profile them side by side and cross-check their output.
"""

from __future__ import annotations

import abc
from typing import Protocol, Sequence, runtime_checkable

from population_window.domain.models import AnalysisResult, PersonRecord


@runtime_checkable
class PopulationStrategy(Protocol):
    """
    Common interface all population strategies implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the approach.
    """

    name: str
    description: str

    def execute(
        self, start_year: int, end_year: int, people: Sequence[PersonRecord]
    ) -> AnalysisResult:
        """
        Analyze ``people`` over the inclusive window and return the result.
        """
        ...


class AbstractPopulationStrategy(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses set `name` and `description` and implement `execute`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def execute(
        self, start_year: int, end_year: int, people: Sequence[PersonRecord]
    ) -> AnalysisResult:  # pragma: no cover - interface only
        """Run the strategy and return the analysis."""
        raise NotImplementedError


__all__ = [
    "AbstractPopulationStrategy",
    "PopulationStrategy",
]
