from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import click
import typer
from pydantic import TypeAdapter, ValidationError

from population_window.analyzer import PopulationWindowAnalyzer, SpanTooLargeError
from population_window.config import get_settings
from population_window.diagnostics import LoggingSink
from population_window.domain.models import PersonRecord
from population_window.orchestrator import available_strategies, run_strategies
from population_window.reporter import print_analysis, print_benchmark, print_people
from population_window.samples import CONTROLLED_PEOPLE, random_people
from population_window.utils.logging import configure_logging

app = typer.Typer(help="Find the years with the largest population in a window.")

_people_adapter = TypeAdapter(List[PersonRecord])


def _setup() -> PopulationWindowAnalyzer:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    return PopulationWindowAnalyzer(sink=LoggingSink(), max_span=settings.max_span_years)


def _run_samples(
    analyzer: PopulationWindowAnalyzer,
    people: Sequence[PersonRecord],
    title: str,
    start_year: int,
    end_year: int,
) -> None:
    typer.echo("=" * 35)
    typer.echo(title)
    print_people(people, title="Source Data")
    result = analyzer.analyze(start_year, end_year, people)
    print_analysis(result, title="Population Results")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"window={settings.start_year}-{settings.end_year} "
        f"max_span={settings.max_span_years} | "
        f"sample_size={settings.sample_size} seed={settings.sample_seed} "
        f"runs={settings.benchmark_runs} | log={settings.log_level}"
    )


@app.command()
def demo(
    count: Optional[int] = typer.Option(
        None, "--count", "-n", help="Number of random people (default from settings)."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the random sample."),
) -> None:
    """
    Run the controlled sample and a random sample through the analyzer.
    """
    settings = get_settings()
    analyzer = _setup()
    start, end = settings.start_year, settings.end_year

    _run_samples(analyzer, CONTROLLED_PEOPLE, "Controlled Test:", start, end)
    sample = random_people(
        settings.sample_size if count is None else count,
        start,
        end,
        seed=settings.sample_seed if seed is None else seed,
    )
    _run_samples(analyzer, sample, "Random Test:", start, end)


@app.command()
def analyze(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON list of people."),
    start: Optional[int] = typer.Option(None, "--start", help="First year of the window."),
    end: Optional[int] = typer.Option(None, "--end", help="Last year of the window."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """
    Analyze people loaded from a JSON file of {birthYear, deathYear} objects.
    """
    settings = get_settings()
    analyzer = _setup()

    try:
        people = _people_adapter.validate_json(path.read_bytes())
    except (OSError, ValidationError) as exc:
        typer.echo(f"Invalid people file {path}: {exc}", err=True)
        raise typer.Exit(code=1)

    start_year = settings.start_year if start is None else start
    end_year = settings.end_year if end is None else end
    try:
        result = analyzer.analyze(start_year, end_year, people)
    except SpanTooLargeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.model_dump(by_alias=True, mode="json"), indent=2))
    else:
        print_analysis(result)


@app.command()
def benchmark(
    strategy: str = typer.Option(
        "all",
        "--strategy",
        "-s",
        help="Strategy to run (delta, naive, all) or 'list' to show them.",
    ),
    count: Optional[int] = typer.Option(
        None, "--count", "-n", help="Number of random people (default from settings)."
    ),
    runs: Optional[int] = typer.Option(
        None, "--runs", "-r", min=1, help="Measurement runs per strategy."
    ),
    persist: bool = typer.Option(False, "--persist", help="Write results/latest.json."),
) -> None:
    """
    Profile strategies on a random sample and cross-check their results.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    if strategy == "list":
        typer.echo("Available strategies: " + ", ".join(available_strategies()))
        return

    people = random_people(
        settings.sample_size if count is None else count,
        settings.start_year,
        settings.end_year,
        seed=settings.sample_seed,
    )
    try:
        results = run_strategies(
            strategy_names=[strategy],
            people=people,
            runs=runs or settings.benchmark_runs,
            persist=persist,
        )
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    print_benchmark(results)
    if not results[0]["consistent"]:
        raise typer.Exit(code=2)


def main() -> None:
    # Outside standalone mode click re-raises Ctrl-C as Abort instead of exiting 1.
    try:
        code = app(standalone_mode=False)
    except (KeyboardInterrupt, click.exceptions.Abort):
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
    except click.ClickException as exc:
        exc.show()
        sys.exit(exc.exit_code)
    sys.exit(code or 0)


if __name__ == "__main__":
    main()
