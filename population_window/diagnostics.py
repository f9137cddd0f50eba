"""
Diagnostic sinks for the delta-array computation.

The analyzer hands its intermediate arrays to a sink so they can be inspected
without touching the pure computation. The default sink does nothing;
`LoggingSink` writes both arrays to a logger at DEBUG level.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence, runtime_checkable

from population_window.utils.logging import get_logger


def cumulative_population(deltas: Sequence[int]) -> List[int]:
    """Running sum of the per-year deltas, i.e. population size by year."""
    sizes: List[int] = []
    current = 0
    for delta in deltas:
        current += delta
        sizes.append(current)
    return sizes


@runtime_checkable
class DiagnosticSink(Protocol):
    """
    Receives the intermediate arrays of one analysis.

    Implementations must not mutate the sequences they are given.
    """

    def record(
        self,
        start_year: int,
        deltas: Sequence[int],
        population_by_year: Sequence[int],
    ) -> None: ...


class NullSink:
    """Discards everything."""

    def record(
        self,
        start_year: int,
        deltas: Sequence[int],
        population_by_year: Sequence[int],
    ) -> None:
        return None


class LoggingSink:
    """
    Emit the delta and cumulative arrays as structured log records.

    Parameters
    ----------
    logger : logging.Logger, optional
        Target logger. Defaults to this module's logger.
    level : int
        Level used for both records.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG) -> None:
        self._log = logger or get_logger(__name__)
        self._level = level

    @property
    def enabled(self) -> bool:
        return self._log.isEnabledFor(self._level)

    def record(
        self,
        start_year: int,
        deltas: Sequence[int],
        population_by_year: Sequence[int],
    ) -> None:
        if not self.enabled:
            return
        self._log.log(
            self._level,
            "Population deltas by year",
            extra={"start_year": start_year, "deltas": list(deltas)},
        )
        self._log.log(
            self._level,
            "Population size by year",
            extra={"start_year": start_year, "population_by_year": list(population_by_year)},
        )


__all__ = ["DiagnosticSink", "LoggingSink", "NullSink", "cumulative_population"]
