"""
Strategies package for the population window analysis.

Re-exports the strategy interfaces and the concrete implementations so
callers can import from `population_window.strategies` directly.
"""

from population_window.strategies.abstract import (
    AbstractPopulationStrategy,
    PopulationStrategy,
)
from population_window.strategies.delta import DeltaArrayStrategy
from population_window.strategies.naive import NaiveStrategy

__all__ = [
    # Abstracts
    "AbstractPopulationStrategy",
    "PopulationStrategy",
    # Concrete strategies
    "DeltaArrayStrategy",
    "NaiveStrategy",
]
