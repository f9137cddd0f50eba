"""
Orchestrator for running population strategies under the profiler.

Every run is profiled, successful results are cross-checked against each
other, and the payload can be persisted for later comparison.

Usage (example from CLI):
    from population_window.orchestrator import run_strategies

    results = run_strategies(strategy_names=["delta", "naive"], runs=3)

Outputs are saved to `results/` when `persist=True`:
- `results/latest.json` (last run)
- `results/run-<timestamp>.json` (timestamped archive)
"""

from __future__ import annotations

import json
import statistics
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from population_window.config import get_settings
from population_window.domain.models import AnalysisResult, PersonRecord
from population_window.samples import random_people
from population_window.strategies.abstract import PopulationStrategy
from population_window.strategies.delta import DeltaArrayStrategy
from population_window.strategies.naive import NaiveStrategy
from population_window.utils.logging import get_logger
from population_window.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)


def _round_float(value: float, decimals: int = 2) -> float:
    """Round a float to specified decimal places for human-readable output."""
    return round(value, decimals)


def _aggregate_durations(run_results: List[dict]) -> dict:
    """Median, mean, stddev, min and max of the successful run durations."""
    durations = [r["duration_seconds"] for r in run_results if "error" not in r]
    if not durations:
        return {}
    return {
        "median": _round_float(statistics.median(durations), 6),
        "mean": _round_float(statistics.mean(durations), 6),
        "stddev": _round_float(statistics.stdev(durations), 6) if len(durations) > 1 else 0.0,
        "min": _round_float(min(durations), 6),
        "max": _round_float(max(durations), 6),
    }


def _strategy_factories(max_span: Optional[int]) -> Dict[str, Callable[[], PopulationStrategy]]:
    """Registry of available strategies."""
    return {
        "delta": lambda: DeltaArrayStrategy(max_span=max_span),
        "naive": lambda: NaiveStrategy(max_span=max_span),
    }


def available_strategies() -> List[str]:
    """List available strategy names."""
    return sorted(_strategy_factories(None).keys())


def _resolve_strategy(name: str, max_span: Optional[int]) -> PopulationStrategy:
    factories = _strategy_factories(max_span)
    if name not in factories:
        raise ValueError(f"Unknown strategy '{name}'. Available: {', '.join(sorted(factories))}")
    return factories[name]()


def _persist_results(payload: dict, results_dir: Path) -> None:
    results_dir.mkdir(parents=True, exist_ok=True)
    latest_path = results_dir / "latest.json"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    archive_path = results_dir / f"run-{timestamp}.json"

    for path in (latest_path, archive_path):
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"latest": str(latest_path), "archive": str(archive_path)})


def _profiled_execute(
    strategy: PopulationStrategy,
    start_year: int,
    end_year: int,
    people: Sequence[PersonRecord],
) -> dict:
    log.info(f"[STRATEGY START] {strategy.name}", extra={"strategy": strategy.name})
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None
    with profile_block(strategy.name) as stats:
        try:
            result = strategy.execute(start_year, end_year, people)
            log.info(
                f"[STRATEGY SUCCESS] {strategy.name}",
                extra={"strategy": strategy.name, "recorded": result.samples_recorded},
            )
        except Exception as exc:  # noqa: BLE001 - a failing strategy must not abort the batch
            log.exception(f"[STRATEGY FAILED] {strategy.name}", extra={"strategy": strategy.name})
            error = str(exc)

    return _merge_result(result, stats, people_count=len(people), error=error)


def _merge_result(
    result: Optional[AnalysisResult],
    stats: ProfileStats,
    people_count: int,
    error: Optional[str] = None,
) -> dict:
    """Combine an analysis result with its profiler stats into a plain dict."""
    merged: dict = {
        "people": people_count,
        "duration_seconds": stats.duration_seconds,
        "people_per_sec": (
            _round_float(people_count / stats.duration_seconds) if stats.duration_seconds else 0.0
        ),
        "peak_rss_bytes": stats.peak_rss_bytes,
        "peak_traced_bytes": stats.peak_traced_bytes,
        "cpu_percent": _round_float(stats.cpu_percent, 1) if stats.cpu_percent else None,
        "profile": {
            "label": stats.label,
            "start_ts": _round_float(stats.start_ts, 3),
            "end_ts": _round_float(stats.end_ts, 3),
        },
    }
    if result is not None:
        merged["result"] = result.model_dump(by_alias=True, mode="json")
    if error is not None:
        merged["error"] = error
    return merged


def _check_consistency(results: List[dict]) -> bool:
    """True when every successful run produced the same analysis."""
    outcomes = [r["result"] for r in results if "result" in r]
    return all(outcome == outcomes[0] for outcome in outcomes[1:])


def run_strategies(
    strategy_names: Optional[Iterable[str]] = None,
    people: Optional[Sequence[PersonRecord]] = None,
    start_year: Optional[int] = None,
    end_year: Optional[int] = None,
    runs: int = 1,
    persist: bool = False,
    results_dir: Path | str = "results",
) -> List[dict]:
    """
    Run one or more strategies over the same people and window.

    Parameters
    ----------
    strategy_names : iterable[str] | None
        Strategy names to execute. If None or ["all"], executes all available.
    people : Sequence[PersonRecord] | None
        Input records. Defaults to a random sample sized by the settings.
    start_year, end_year : int | None
        Query window. Defaults to the settings' window.
    runs : int
        Measurement runs per strategy.
    persist : bool
        Whether to write results to disk.
    results_dir : Path | str
        Directory to store JSON artifacts.

    Returns
    -------
    List[dict]
        One entry per strategy with its runs, duration statistics and a
        `consistent` flag telling whether all runs of all strategies agree.
    """
    settings = get_settings()
    start = settings.start_year if start_year is None else start_year
    end = settings.end_year if end_year is None else end_year
    if people is None:
        people = random_people(settings.sample_size, start, end, seed=settings.sample_seed)

    names = list(strategy_names) if strategy_names is not None else ["all"]
    if len(names) == 1 and names[0] == "all":
        names = available_strategies()
    names = list(dict.fromkeys(names))
    strategies = {name: _resolve_strategy(name, settings.max_span_years) for name in names}

    total_global_runs = len(names) * runs
    current_run = 0

    results: List[dict] = []
    for name, strategy in strategies.items():
        log.info(f"[STRATEGY] {name.upper()}", extra={"strategy": name})

        run_results: List[dict] = []
        for run_num in range(1, runs + 1):
            current_run += 1
            log.info(
                f"[RUN {current_run}/{total_global_runs}] Starting measurement for {name}",
                extra={"strategy": name, "run": run_num, "people": len(people)},
            )
            result = _profiled_execute(strategy, start, end, people)
            result["strategy"] = name
            result["run"] = run_num
            run_results.append(result)

        results.append(
            {
                "strategy": name,
                "runs": runs,
                "start_year": start,
                "end_year": end,
                "people": len(people),
                "duration_seconds": _aggregate_durations(run_results),
                "individual_runs": run_results,
            }
        )

    consistent = _check_consistency([run for entry in results for run in entry["individual_runs"]])
    if not consistent:
        log.warning("Strategies disagree on the analysis", extra={"strategies": names})
    for entry in results:
        entry["consistent"] = consistent

    if persist:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "start_year": start,
            "end_year": end,
            "strategies": names,
            "results": results,
        }
        _persist_results(payload, Path(results_dir))

    log.info(
        f"[ORCHESTRATOR COMPLETE] {len(names)} strategy/strategies executed",
        extra={"strategies": names, "consistent": consistent},
    )
    return results


__all__ = [
    "available_strategies",
    "run_strategies",
]
