"""
Profiling helpers used by the benchmark orchestrator.

`profile_block` measures wall-clock time with perf_counter, peak RSS through a
background psutil sampling thread, peak Python allocations via tracemalloc,
and a CPU percent snapshot.

Usage:
    from population_window.utils.profiler import profile_block

    with profile_block("delta") as stats:
        analyze(1900, 2000, people)

    print(stats.duration_seconds, stats.peak_rss_bytes, stats.peak_traced_bytes)
"""

from __future__ import annotations

import contextlib
import threading
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Any, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Measurements collected for one profiled block.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    peak_rss_bytes: Optional[int] = field(default=None)
    peak_traced_bytes: Optional[int] = field(default=None)
    cpu_percent: Optional[float] = field(default=None)
    extra: dict[str, Any] = field(default_factory=dict)


@contextlib.contextmanager
def profile_block(
    label: str, sample_interval_ms: int = 20, enable_tracemalloc: bool = True
) -> Generator[ProfileStats, None, None]:
    """
    Profile the enclosed block.

    Parameters
    ----------
    label : str
        Name recorded on the returned stats.
    sample_interval_ms : int
        RSS sampling interval of the background thread.
    enable_tracemalloc : bool
        Track peak Python allocations. tracemalloc is only stopped afterwards
        if this block started it.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()
    peak_rss = process.memory_info().rss
    stop_sampling = threading.Event()

    def _sample_memory() -> None:
        nonlocal peak_rss
        while not stop_sampling.is_set():
            try:
                peak_rss = max(peak_rss, process.memory_info().rss)
            except psutil.Error:
                return
            stop_sampling.wait(timeout=sample_interval_ms / 1000.0)

    started_tracemalloc = False
    if enable_tracemalloc and not tracemalloc.is_tracing():
        tracemalloc.start()
        started_tracemalloc = True

    # First call primes the counter; the value after the block is meaningful.
    process.cpu_percent(interval=None)

    sampler = threading.Thread(target=_sample_memory, daemon=True)
    sampler.start()

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts

        stop_sampling.set()
        sampler.join(timeout=1.0)

        stats.peak_rss_bytes = peak_rss or None
        stats.cpu_percent = process.cpu_percent(interval=None)

        if enable_tracemalloc and tracemalloc.is_tracing():
            _, peak_traced = tracemalloc.get_traced_memory()
            stats.peak_traced_bytes = peak_traced
            if started_tracemalloc:
                tracemalloc.stop()


__all__ = ["ProfileStats", "profile_block"]
