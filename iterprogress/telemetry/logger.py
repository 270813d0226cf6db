"""Structured run logging for the demo commands.

Responsibilities:
- Emit one `[phase]` line per command start, completion and failure via `loguru`.
- Keep log lines on stderr so they never interleave with the stdout bar.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

_SAFE_PUNCTUATION = frozenset("-_.:/")


def _context_token(value: object) -> str:
    """Render a context value as a single whitespace-free token."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in _SAFE_PUNCTUATION else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context such as item counts and intervals in key order."""

    return "".join(f" {key}={_context_token(context[key])}" for key in sorted(context))


class RunLogger:
    """Emit phase logs around draining a decorated iterator."""

    def __init__(self, sink: TextIO | None = None) -> None:
        """Replace loguru handlers with one plain-message sink (stderr by default)."""

        self._sink = sink or sys.stderr
        logger.remove()
        logger.add(self._sink, format="{message}", level="INFO", colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured phase line."""

        line = f"[phase] level={level} stage={stage} event={event}{_format_context(context)}"
        logger.log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Log that a command began draining its iterator."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Log that a command drained its iterator to exhaustion."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Log a failed run by exception type; details go to the CLI error output."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
