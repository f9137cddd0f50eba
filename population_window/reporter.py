from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from population_window.domain.models import AnalysisResult, PersonRecord


def _format_year(year: Optional[int]) -> str:
    return "-" if year is None else str(year)


def _collapse_years(years: Sequence[int]) -> str:
    """
    Render ascending years as ranges, e.g. ``1900-1909, 1920-1929``.
    """
    if not years:
        return "-"
    ranges: List[str] = []
    first = prev = years[0]
    for year in years[1:]:
        if year == prev + 1:
            prev = year
            continue
        ranges.append(str(first) if first == prev else f"{first}-{prev}")
        first = prev = year
    ranges.append(str(first) if first == prev else f"{first}-{prev}")
    return ", ".join(ranges)


def print_people(
    people: Sequence[PersonRecord],
    title: str = "Source Data",
    console: Optional[Console] = None,
) -> None:
    """Render the input records, one row per person."""
    console = console or Console()
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Birth", justify="right", style="cyan")
    table.add_column("Death", justify="right", style="magenta")

    for index, person in enumerate(people):
        table.add_row(str(index), _format_year(person.birth_year), _format_year(person.death_year))

    console.print(table)


def print_analysis(
    result: AnalysisResult,
    title: str = "Population Results",
    console: Optional[Console] = None,
) -> None:
    """Render a single analysis result as a two-column table."""
    console = console or Console()
    table = Table(title=title, box=box.ROUNDED, show_header=False)
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="bold green")

    rejected = result.samples_submitted - result.samples_recorded
    table.add_row("Samples submitted", f"{result.samples_submitted:,}")
    table.add_row("Samples recorded", f"{result.samples_recorded:,}")
    table.add_row("Samples rejected", f"{rejected:,}")
    table.add_row("Max population", f"{result.max_population:,}")
    table.add_row("Peak years", _collapse_years(result.peak_years))

    console.print(table)


def print_benchmark(results: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """
    Render orchestrator results, fastest median duration first.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    table = Table(
        title="Population Strategy Benchmark",
        box=box.ROUNDED,
        caption="Sorted by median duration (ascending)",
    )
    table.add_column("Strategy", style="cyan", no_wrap=True)
    table.add_column("People", justify="right", style="magenta")
    table.add_column("Runs", justify="right", style="blue")
    table.add_column("Duration (ms)\n[dim](Median ± StdDev)[/dim]", justify="right", style="green")
    table.add_column("Peak Memory (MB)", justify="right", style="yellow")
    table.add_column("Errors", justify="right", style="red")

    def get_sort_key(r: Dict[str, Any]) -> float:
        return r["duration_seconds"].get("median", float("inf"))

    for res in sorted(results, key=get_sort_key):
        durations = res["duration_seconds"]
        if durations:
            duration_str = f"{durations['median'] * 1000:.3f} ± {durations['stddev'] * 1000:.3f}"
        else:
            duration_str = "N/A"

        peaks = [r["peak_rss_bytes"] for r in res["individual_runs"] if r.get("peak_rss_bytes")]
        mem_str = f"{max(peaks) / (1024 * 1024):.2f}" if peaks else "N/A"
        errors = sum(1 for r in res["individual_runs"] if "error" in r)

        table.add_row(
            res["strategy"],
            f"{res['people']:,}",
            str(res["runs"]),
            duration_str,
            mem_str,
            str(errors),
        )

    console.print(table)
    if not results[0].get("consistent", True):
        console.print("[bold red]Strategies produced different results.[/bold red]")


__all__ = ["print_analysis", "print_benchmark", "print_people"]
