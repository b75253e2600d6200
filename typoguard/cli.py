"""Command-line interface for typoguard.

Responsibilities:
- Expose user-facing commands for checking resources and literal text.
- Convert CLI arguments into `TypoguardConfig` and run the async pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from .backend_factory import build_default_registry
from .cli_rendering import (
    echo_backend_list,
    echo_progress,
    echo_resource_report,
    echo_summary,
    echo_typo_groups,
    exit_with_command_error,
)
from .config import ConfigLoader, TypoguardConfig
from .errors import PipelineStageError
from .io.http import HttpFetcher
from .models.datatypes import CheckSettings
from .parsing import normalize_extension, parse_csv_tokens
from .pipeline import TypoCheckPipeline, remove_duplicates
from .report.dictionary import write_error_dictionary
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="typoguard",
    no_args_is_help=True,
    help="Check files, web pages, and sitemaps for typos.",
)


def _load_yaml_config(config_path: Path | None) -> TypoguardConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _load_env_config() -> TypoguardConfig:
    """Load environment defaults and map invalid values to stage errors."""

    try:
        return ConfigLoader.from_env()
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset the offending `TYPOGUARD_*` variable.",
        ) from exc


def _resolve_config(
    config_file: Path | None,
    *,
    text_format: str | None = None,
    lang: str | None = None,
    max_requests: int | None = None,
    check_yo: bool | None = None,
    ignore_tags: str | None = None,
    file_extensions: str | None = None,
    speller_options: list[str] | None = None,
    dictionary_report: Path | None = None,
) -> TypoguardConfig:
    """Resolve effective config from YAML or environment defaults and CLI overrides."""

    config = _load_yaml_config(config_file) or _load_env_config()

    if text_format is not None:
        config.format = text_format.strip().lower()
    if lang is not None:
        config.languages = parse_csv_tokens(lang)
    if max_requests is not None:
        config.max_requests = max_requests
    if check_yo is not None:
        config.check_yo = check_yo
    if ignore_tags is not None:
        config.ignore_tags = parse_csv_tokens(ignore_tags)
    if file_extensions is not None:
        config.file_extensions = tuple(
            normalize_extension(item) for item in parse_csv_tokens(file_extensions)
        )
    if speller_options:
        options = dict(config.options)
        options.update({name.strip(): True for name in speller_options})
        config.options = options
    if dictionary_report is not None:
        config.dictionary_report = dictionary_report
    return config


def _check_settings(config: TypoguardConfig) -> CheckSettings:
    """Validate resolved config and build run settings."""

    try:
        return config.to_check_settings()
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=str(exc),
            hint="Fix CLI flags or config values and rerun.",
        ) from exc


def _build_pipeline(config: TypoguardConfig, run_logger: RunLogger) -> TypoCheckPipeline:
    """Construct the pipeline with the default backends."""

    return TypoCheckPipeline(
        build_default_registry(config, run_logger),
        fetcher=HttpFetcher(timeout_seconds=config.timeout_seconds),
        run_logger=run_logger,
    )


@app.command("check")
def check_command(
    resources: Annotated[
        list[str],
        typer.Argument(help="Files, directories, URLs, or sitemap URLs to check."),
    ],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
    text_format: Annotated[
        str | None,
        typer.Option("--format", help="Input format: `auto`, `plain`, `html`, or `markdown`."),
    ] = None,
    lang: Annotated[
        str | None,
        typer.Option("--lang", help="Comma-separated language codes, e.g. `en,ru`."),
    ] = None,
    max_requests: Annotated[
        int | None,
        typer.Option("--max-requests", min=1, help="Maximum concurrent requests."),
    ] = None,
    check_yo: Annotated[
        bool | None,
        typer.Option("--check-yo/--no-check-yo", help="Report words that need the letter Ё."),
    ] = None,
    ignore_tags: Annotated[
        str | None,
        typer.Option("--ignore-tags", help="Comma-separated markup tags to skip."),
    ] = None,
    file_extensions: Annotated[
        str | None,
        typer.Option(
            "--file-extensions",
            help="Comma-separated extensions picked up in directories.",
        ),
    ] = None,
    speller_options: Annotated[
        list[str] | None,
        typer.Option(
            "--speller-option",
            help="Speller option flag to enable, e.g. `ignore_digits`. Repeatable.",
        ),
    ] = None,
    dictionary_report: Annotated[
        Path | None,
        typer.Option(
            "--dictionary-report",
            help="Write found words as a JSON array to this path.",
        ),
    ] = None,
    only_errors: Annotated[
        bool,
        typer.Option("--only-errors", help="Hide resources without typos."),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Emit debug request traces to stderr."),
    ] = False,
) -> None:
    """Check resources and exit with code 1 when typos or failures are found."""

    try:
        config = _resolve_config(
            config_file,
            text_format=text_format,
            lang=lang,
            max_requests=max_requests,
            check_yo=check_yo,
            ignore_tags=ignore_tags,
            file_extensions=file_extensions,
            speller_options=speller_options,
            dictionary_report=dictionary_report,
        )
        settings = _check_settings(config)
        pipeline = _build_pipeline(config, RunLogger(debug=debug))
        results = asyncio.run(
            pipeline.check_resources(
                resources,
                settings,
                extensions=config.file_extensions,
                on_result=echo_progress,
            )
        )
    except Exception as exc:
        exit_with_command_error("check", exc)

    for result in results:
        echo_resource_report(result, only_errors=only_errors)
    echo_summary(results)

    if config.dictionary_report is not None:
        try:
            written = write_error_dictionary(results, config.dictionary_report)
        except OSError as exc:
            exit_with_command_error(
                "check",
                PipelineStageError(
                    stage="report",
                    detail=f"Could not write dictionary `{config.dictionary_report}`: {exc}",
                    hint="Choose a writable `--dictionary-report` path.",
                ),
            )
        typer.echo(f"Dictionary: {written}")

    if any(result.failed or result.typos for result in results):
        raise typer.Exit(code=1)


@app.command("text")
def text_command(
    text: Annotated[str, typer.Argument(help="Literal text to check.")],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
    text_format: Annotated[
        str | None,
        typer.Option("--format", help="Input format: `auto`, `plain`, `html`, or `markdown`."),
    ] = None,
    lang: Annotated[
        str | None,
        typer.Option("--lang", help="Comma-separated language codes, e.g. `en,ru`."),
    ] = None,
    check_yo: Annotated[
        bool | None,
        typer.Option("--check-yo/--no-check-yo", help="Report words that need the letter Ё."),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Emit debug request traces to stderr."),
    ] = False,
) -> None:
    """Check literal text and exit with code 1 when typos are found."""

    try:
        config = _resolve_config(
            config_file,
            text_format=text_format,
            lang=lang,
            check_yo=check_yo,
        )
        settings = _check_settings(config)
        pipeline = _build_pipeline(config, RunLogger(debug=debug))
        outcome = asyncio.run(pipeline.check_text(text, settings))
    except Exception as exc:
        exit_with_command_error("text", exc)

    if outcome.failed:
        typer.secho(f"text failed: {outcome.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typos = remove_duplicates(outcome.typos or ())
    if not typos:
        typer.secho("No typos.", fg=typer.colors.GREEN)
        return
    echo_typo_groups(typos)
    raise typer.Exit(code=1)


@app.command("backends")
def backends_command(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
) -> None:
    """List registered backends with languages and formats."""

    try:
        config = _resolve_config(config_file)
        registry = build_default_registry(config)
    except Exception as exc:
        exit_with_command_error("backends", exc)

    echo_backend_list(registry.descriptors())


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
