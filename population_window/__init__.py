"""
Population Window - find the years with the largest population.

Given people with birth and death years, the package computes which years of
an inclusive window had the most people alive, using a difference array of
births and deaths folded by a prefix sum. Around that core it provides:

- Pydantic value types for the input records and the result
- Injectable diagnostic sinks for the intermediate arrays
- A reference per-year strategy and a profiling orchestrator to compare both
- A Typer CLI with rich output
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from population_window.analyzer import PopulationWindowAnalyzer, SpanTooLargeError, analyze
from population_window.config import Settings, get_settings
from population_window.diagnostics import DiagnosticSink, LoggingSink, NullSink
from population_window.domain.models import AnalysisResult, PersonRecord
from population_window.orchestrator import available_strategies, run_strategies
from population_window.strategies.abstract import (
    AbstractPopulationStrategy,
    PopulationStrategy,
)
from population_window.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Core analysis
    "analyze",
    "PopulationWindowAnalyzer",
    "SpanTooLargeError",
    "AnalysisResult",
    "PersonRecord",
    # Diagnostics
    "DiagnosticSink",
    "LoggingSink",
    "NullSink",
    # Configuration
    "Settings",
    "get_settings",
    # Orchestration
    "available_strategies",
    "run_strategies",
    "PopulationStrategy",
    "AbstractPopulationStrategy",
    # Logging
    "configure_logging",
    "get_logger",
]
