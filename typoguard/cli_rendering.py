"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
per-resource progress lines, typo reports, and run summaries.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NoReturn

import typer

from .errors import PipelineStageError
from .models.datatypes import TYPO_CODE_TITLES, BackendDescriptor, CrawlResult, TypoRecord
from .pipeline.dedupe import remove_duplicates


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
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


def echo_progress(result: CrawlResult) -> None:
    """Print one progress line as a resource completes."""

    if result.failed:
        typer.echo(f"[progress] failed {result.resource}")
        return
    typer.echo(
        f"[progress] checked {result.resource} "
        f"typos={len(remove_duplicates(result.typos))} elapsed_ms={result.elapsed_millis}"
    )


def format_typo_line(position: int, typo: TypoRecord) -> str:
    """Render one numbered typo row: word, count, and suggestions."""

    line = f"{position}. {typo.word or '(whole text)'}"
    if typo.count > 1:
        line += f" (count: {typo.count})"
    if typo.suggestions:
        line += f" -> {', '.join(typo.suggestions)}"
    return line


def echo_resource_report(result: CrawlResult, *, only_errors: bool = False) -> None:
    """Print the deduplicated report of one resource grouped by typo code."""

    if result.failed:
        typer.secho(result.message, fg=typer.colors.RED)
        return

    typos = remove_duplicates(result.typos)
    if not typos:
        if not only_errors:
            typer.secho(f"{result.resource}: no typos", fg=typer.colors.GREEN)
        return

    typer.secho(result.resource, bold=True)
    echo_typo_groups(typos)


def echo_typo_groups(typos: Sequence[TypoRecord]) -> None:
    """Print deduplicated typo records grouped by code in first-seen order."""

    grouped: dict[int, list[TypoRecord]] = {}
    for typo in typos:
        grouped.setdefault(typo.code, []).append(typo)
    for code, records in grouped.items():
        title = TYPO_CODE_TITLES.get(code, f"Code {code}")
        typer.secho(f"{title} ({len(records)})", fg=typer.colors.YELLOW)
        for position, typo in enumerate(records, start=1):
            typer.echo(f"  {format_typo_line(position, typo)}")


def echo_summary(results: Sequence[CrawlResult]) -> None:
    """Print run-level resource counts."""

    failed = sum(1 for result in results if result.failed)
    with_typos = sum(1 for result in results if not result.failed and result.typos)
    typer.echo(
        f"Checked {len(results)} resource(s): {with_typos} with typos, {failed} failed."
    )


def echo_backend_list(descriptors: Sequence[BackendDescriptor]) -> None:
    """Print registered backends with their languages and formats."""

    for descriptor in descriptors:
        typer.echo(
            f"{descriptor.name}: {descriptor.description} "
            f"(languages: {', '.join(descriptor.languages)}; "
            f"formats: {', '.join(descriptor.formats)})"
        )
