"""Main CLI entry point for rebench.

This module defines the Typer application running the benchmark
comparison.
"""

from __future__ import annotations

import logging
import sys
from typing import Annotated

import typer

from rebench import __version__
from rebench.core.config import Settings
from rebench.core.exceptions import ConfigurationError
from rebench.core.rebench import rebench

app = typer.Typer(
    name="rebench",
    help="rebench: track Go benchmarks across development.",
    add_completion=False,
)


def configure_logging(level: str, quiet: bool) -> None:
    """Configure the root logger once for the process.

    Args:
        level: Logging level name.
        quiet: Mute everything below CRITICAL.
    """
    logging.basicConfig(
        level=logging.CRITICAL if quiet else level.upper(),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rebench v{__version__}")
        raise typer.Exit()


@app.command()
def main(
    speed_tol: Annotated[
        int | None,
        typer.Option(
            "--speed-tol",
            "--speedTol",
            help="Percentage tolerance for a slower benchmark before returning a non-zero exit status. [default: 150]",
            show_default=False,
        ),
    ] = None,
    record_tol: Annotated[
        int | None,
        typer.Option(
            "--record-tol",
            "--recordTol",
            help="Percentage tolerance for a faster benchmark before overwriting the previous speed record. [default: 70]",
            show_default=False,
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Squelch the log output.",
        ),
    ] = False,
    version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Track benchmarks across development.

    Runs every benchmark below the current directory. On the first run the
    results are stored as the best known timings in a hidden .bench_best.json
    next to each package. Later runs compare against those bests: if a
    benchmark is slower than --speed-tol percent of its best, or an old
    benchmark is missing, the exit status is 1. A benchmark faster than
    --record-tol percent of its best overwrites the previous record.

    Each package also gets bench_comparison.txt with the new timings, the
    best timings and the factor new/best.
    """
    settings = Settings()
    configure_logging(settings.log_level, quiet or settings.quiet)

    try:
        exit_code = rebench(
            speed_tol if speed_tol is not None else settings.speed_tolerance,
            record_tol if record_tol is not None else settings.record_tolerance,
            settings=settings,
        )
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2) from e

    raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()
