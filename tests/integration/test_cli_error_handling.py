"""CLI error-handling tests for concise diagnostics."""

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from iterprogress.cli import app
from iterprogress.errors import ProgressStageError


def test_count_command_reports_invalid_option_as_config_error() -> None:
    """Negative counts should fail at the config stage with exit code 1."""

    runner = CliRunner()

    result = runner.invoke(app, ["count", "--count=-1"])

    assert result.exit_code == 1
    assert "count failed at stage `config`" in result.output
    assert "Hint:" in result.output


def test_fib_command_reports_missing_config_file(tmp_path: Path) -> None:
    """A missing `--config` path should be reported with a hint."""

    runner = CliRunner()

    result = runner.invoke(app, ["fib", "--config", str(tmp_path / "missing.yml")])

    assert result.exit_code == 1
    assert "fib failed at stage `config`: Config file not found" in result.output
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in result.output


def test_count_command_reports_render_failure(monkeypatch: MonkeyPatch) -> None:
    """Render errors raised while iterating should surface as stage errors."""

    def _failing_write(*_: object, **__: object) -> None:
        """Raise a render-stage error to simulate a broken output stream."""

        raise ProgressStageError(
            stage="render",
            detail="Failed to write progress bar: broken pipe",
            hint="Check that the output stream is open and writable.",
        )

    monkeypatch.setattr("iterprogress.percent.PercentIterator._write", _failing_write)
    runner = CliRunner()

    result = runner.invoke(app, ["count", "--count", "2", "--interval-ms", "0"])

    assert result.exit_code == 1
    assert "count failed at stage `render`: Failed to write progress bar" in result.output
    assert "[phase] level=ERROR stage=count event=failure" in result.output
