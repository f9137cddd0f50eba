"""
Utilities package for the population window analysis.

Exports shared helpers for logging and profiling. Keep this package free of
domain logic.
"""

from population_window.utils.logging import configure_logging, get_logger
from population_window.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
