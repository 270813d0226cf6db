"""Command-line interface for iterprogress demos.

Responsibilities:
- Expose demo commands that drive decorated iterators to exhaustion.
- Convert CLI arguments, YAML config and environment into `DemoConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_run_summary, exit_with_command_error
from .config import ConfigLoader, DemoConfig
from .errors import ProgressStageError
from .extensions import rate_limit, show_percent
from .sequences import digit_count, fibonacci_terms
from .telemetry import RunLogger, RunStats

app = typer.Typer(
    name="iterprogress",
    no_args_is_help=True,
    help="Rate-limited iteration and progress bar demos.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="Path to YAML config file with command defaults.",
    ),
]


def _resolve_config(config_file: Path | None, **overrides: int | None) -> DemoConfig:
    """Resolve effective config from environment, YAML file and CLI overrides."""

    try:
        config = ConfigLoader.from_env()
        if config_file is not None:
            config = ConfigLoader.from_yaml(config_file, base=config)
        return config.with_overrides(**overrides)
    except FileNotFoundError as exc:
        raise ProgressStageError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ProgressStageError(
            stage="config",
            detail=f"Invalid configuration: {exc}",
            hint="Fix config file, environment or option values and rerun.",
        ) from exc


@app.command("count")
def count_command(
    count: Annotated[
        int | None,
        typer.Option("--count", help="Number of values to drain (default 113)."),
    ] = None,
    interval_ms: Annotated[
        int | None,
        typer.Option(
            "--interval-ms",
            help="Minimum milliseconds between values (default 100).",
        ),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Count through a range slowly enough to watch the progress bar move."""

    run_logger = RunLogger()
    stats = RunStats()
    try:
        config = _resolve_config(config_file, count=count, interval_ms=interval_ms)
        run_logger.log_stage_start(
            "count", items=config.count, interval_ms=config.interval_ms
        )
        throttled = rate_limit(range(config.count), config.interval_seconds)
        progress = show_percent(throttled)
        for _ in progress:
            stats.record_value()
        stats.add_throttle_limiter(throttled.limiter)
        stats.add_render_limiter(progress.limiter)
        run_logger.log_stage_complete("count", yielded=stats.yielded)
    except Exception as exc:
        run_logger.log_stage_failure("count", type(exc).__name__)
        exit_with_command_error("count", exc)

    echo_run_summary(stats)


@app.command("fib")
def fib_command(
    length: Annotated[
        int | None,
        typer.Option("--length", help="Number of Fibonacci terms (default 10000)."),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Compute Fibonacci terms with a progress bar and report the last one's size."""

    run_logger = RunLogger()
    stats = RunStats()
    last: int | None = None
    try:
        config = _resolve_config(config_file, fib_length=length)
        run_logger.log_stage_start("fib", length=config.fib_length)
        progress = show_percent(fibonacci_terms(config.fib_length))
        for value in progress:
            last = value
            stats.record_value()
        stats.add_render_limiter(progress.limiter)
        run_logger.log_stage_complete("fib", yielded=stats.yielded)
    except Exception as exc:
        run_logger.log_stage_failure("fib", type(exc).__name__)
        exit_with_command_error("fib", exc)

    if last is None:
        typer.echo("No Fibonacci terms requested.")
    else:
        typer.echo(
            f"The {config.fib_length}th member of the fibonacci sequence "
            f"is {digit_count(last)} digits long"
        )
    echo_run_summary(stats)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
