"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command
diagnostics and run summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import ProgressStageError
from .telemetry.stats import RunStats

_SUMMARY_LABELS = {
    "yielded": "Values yielded",
    "renders": "Bar renders",
    "skipped_renders": "Skipped renders",
    "slept_seconds": "Throttle sleep (s)",
}


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Report a failed demo run on stderr and exit with code 1.

    Stage errors name the stage and print their hint; anything else is
    reported by message only.
    """

    if isinstance(exc, ProgressStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_run_summary(stats: RunStats) -> None:
    """Print one line per run counter."""

    for key, value in stats.summary().items():
        rendered = f"{value:.3f}" if isinstance(value, float) else str(value)
        typer.echo(f"{_SUMMARY_LABELS[key]}: {rendered}")
