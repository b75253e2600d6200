"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic resource- and backend-level runtime logs.
- Route all lines through `loguru` with a single configurable sink.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger

_PREVIEW_CHARS = 128


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def _preview(text: str) -> str:
    """Truncate text payloads for debug traces."""

    if len(text) <= _PREVIEW_CHARS:
        return text
    return f"{text[: _PREVIEW_CHARS - 3]}..."


class RunLogger:
    """Emit deterministic phase logs for CLI-observable check activity."""

    def __init__(self, sink: TextIO | None = None, *, debug: bool = False) -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        self.debug_enabled = debug
        _loguru_logger.remove()
        _loguru_logger.add(
            self._sink,
            format="{message}",
            level="DEBUG" if debug else "INFO",
            colorize=False,
        )

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[phase] level={level} stage={stage} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_resource_start(self, resource: str) -> None:
        """Emit a resource-start event."""

        self._emit("INFO", "start", "check", resource=resource)

    def log_resource_complete(self, resource: str, typo_count: int, elapsed_millis: int) -> None:
        """Emit a resource-complete event with typo count and timing."""

        self._emit(
            "INFO",
            "complete",
            "check",
            resource=resource,
            typos=typo_count,
            elapsed_ms=elapsed_millis,
        )

    def log_resource_failure(self, resource: str, error_type: str) -> None:
        """Emit a resource-failure event without sensitive payload details."""

        self._emit("ERROR", "failure", "check", resource=resource, error_type=error_type)

    def log_backend_failure(self, backend: str, error_type: str) -> None:
        """Emit a backend-failure event."""

        self._emit("ERROR", "failure", "backend", backend=backend, error_type=error_type)

    def log_callback_failure(self, resource: str, error_type: str) -> None:
        """Emit an event for a progress callback that raised on one result."""

        self._emit("ERROR", "callback_failure", "check", resource=resource, error_type=error_type)

    def log_manifest_warning(self, manifest: str, reason: str) -> None:
        """Emit a warning for a manifest without checkable URLs."""

        self._emit("WARNING", "no_urls", "sitemap", manifest=manifest, reason=reason)

    def log_debug_request(self, backend: str, request_index: int, **context: object) -> None:
        """Emit a debug trace for one backend request; text payloads are truncated."""

        if not self.debug_enabled:
            return
        text = context.pop("text", None)
        if isinstance(text, str):
            context["text"] = _preview(text)
        self._emit("DEBUG", "request", "backend", backend=backend, request=request_index, **context)
