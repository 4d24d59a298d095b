from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
import yaml

from dateseq.combinators import LazyDates
from dateseq.config import load_sequence_config
from dateseq.exceptions import InvalidConfiguration
from dateseq.sequence import DateSequence
from dateseq.utils.logging import configure_logging
from dateseq.utils.time import format_day

logger = logging.getLogger(__name__)

app = typer.Typer(help="Lazy calendar date sequence CLI")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    configure_logging(verbose=verbose)


def _emit(chain: LazyDates) -> None:
    if not chain.is_finite:
        typer.echo(
            "Refusing to print an unbounded sequence: pass --limit or --take.",
            err=True,
        )
        raise typer.Exit(code=2)

    count = 0
    for date in chain:
        typer.echo(format_day(date))
        count += 1
    logger.debug("Printed %d dates", count)


@app.command()
def hello() -> None:
    """Smoke check that the CLI is installed."""
    typer.echo("dateseq: OK")


@app.command()
def print_config(path: Path) -> None:
    """Print a YAML config file as JSON."""
    obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    typer.echo(json.dumps(obj, indent=2, default=str))


@app.command()
def generate(
    start: str = typer.Option(..., "--start", "-s", help="Seed date (not printed), e.g. 2016-02-22."),
    step: int = typer.Option(1, "--step", help="Days between consecutive dates."),
    skip: Optional[str] = typer.Option(None, "--skip", help="Weekday to hop over by one day."),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Dates produced by the generator."),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-x", help="Weekday to filter out (repeatable)."),
    take: Optional[int] = typer.Option(None, "--take", "-t", help="Dates kept after filtering."),
) -> None:
    """Print a sequence of dates, one per line."""
    try:
        chain = DateSequence(start, step_days=step, skip_weekday=skip, limit=limit).lazy()
        if exclude:
            chain = chain.exclude_weekdays(*exclude)
        if take is not None:
            chain = chain.prefix(take)
    except InvalidConfiguration as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=2)

    _emit(chain)


@app.command()
def from_config(path: Path) -> None:
    """Print the dates described by a YAML sequence config."""
    try:
        config = load_sequence_config(path)
    except FileNotFoundError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=2)

    _emit(config.build())


def main() -> None:
    app()


if __name__ == "__main__":
    main()
