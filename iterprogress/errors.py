"""Domain exceptions for progress rendering and CLI diagnostics."""

from __future__ import annotations


class ProgressStageError(RuntimeError):
    """Raised when rendering the bar or loading demo config fails.

    `stage` names where the failure happened (`render` or `config`) and
    `hint` suggests a fix the CLI prints under the error.
    """

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize with the failing stage, a message and an optional hint."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
