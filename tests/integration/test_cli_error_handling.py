"""CLI error-handling tests for concise stage diagnostics."""

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from typoguard.cli import app
from typoguard.errors import PipelineStageError


def test_check_command_reports_missing_config_file(tmp_path: Path) -> None:
    """Check should fail with stage-aware diagnostics when `--config` path is missing."""

    result = CliRunner().invoke(
        app, ["check", "page.txt", "--config", str(tmp_path / "missing.yml")]
    )

    assert result.exit_code == 1
    assert "check failed at stage `config`" in result.output
    assert "Config file not found" in result.output
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in result.output


def test_check_command_reports_invalid_config_values(tmp_path: Path) -> None:
    """Invalid YAML values and CLI overrides map to config stage errors."""

    config_path = tmp_path / "bad.yml"
    config_path.write_text("max_requests: zero\n", encoding="utf-8")
    runner = CliRunner()

    bad_yaml = runner.invoke(app, ["check", "page.txt", "--config", str(config_path)])
    bad_format = runner.invoke(app, ["check", "page.txt", "--format", "rtf"])
    bad_option = runner.invoke(app, ["check", "page.txt", "--speller-option", "shout"])

    assert bad_yaml.exit_code == 1
    assert f"Invalid config file `{config_path}`" in bad_yaml.output
    assert bad_format.exit_code == 1
    assert "Unsupported `format` value `rtf`" in bad_format.output
    assert bad_option.exit_code == 1
    assert "Unknown speller option(s): shout" in bad_option.output


def test_check_command_reports_invalid_environment(monkeypatch: MonkeyPatch) -> None:
    """Malformed `TYPOGUARD_*` variables are reported as config errors."""

    monkeypatch.setenv("TYPOGUARD_MAX_REQUESTS", "lots")

    result = CliRunner().invoke(app, ["check", "page.txt"])

    assert result.exit_code == 1
    assert "Invalid environment configuration" in result.output


def test_text_command_reports_backend_setup_error(monkeypatch: MonkeyPatch) -> None:
    """Backend setup errors produce stage diagnostics and exit code 1."""

    def _failing_build(*_: object, **__: object) -> None:
        raise PipelineStageError(
            stage="config",
            detail="Could not read Yo dictionary `yo.txt`.",
            hint="Point `yo_dictionary` at a UTF-8 file with one word per line.",
        )

    monkeypatch.setattr("typoguard.cli.build_default_registry", _failing_build)

    result = CliRunner().invoke(app, ["text", "hello"])

    assert result.exit_code == 1
    assert "text failed at stage `config`: Could not read Yo dictionary `yo.txt`." in result.output
