"""Unit tests for deterministic run log lines."""

from __future__ import annotations

import io

from typoguard.telemetry.logger import RunLogger


def test_run_logger_emits_sorted_sanitized_context() -> None:
    """Events render as one `[phase]` line with key-sorted, shell-safe context."""

    sink = io.StringIO()
    logger = RunLogger(sink)

    logger.log_resource_complete("docs/read me.md", typo_count=3, elapsed_millis=42)
    logger.log_resource_failure("https://example.test/", "transport")
    logger.log_manifest_warning("https://example.test/sitemap.xml", "has no urlset element")

    lines = sink.getvalue().splitlines()
    assert lines == [
        "[phase] level=INFO stage=check event=complete "
        "elapsed_ms=42 resource=docs/read_me.md typos=3",
        "[phase] level=ERROR stage=check event=failure "
        "error_type=transport resource=https://example.test/",
        "[phase] level=WARNING stage=sitemap event=no_urls "
        "manifest=https://example.test/sitemap.xml reason=has_no_urlset_element",
    ]


def test_run_logger_debug_traces_only_when_enabled_and_truncated() -> None:
    """Request traces are suppressed by default and previews are capped."""

    quiet_sink = io.StringIO()
    RunLogger(quiet_sink).log_debug_request("yandex-speller", 0, text="teh")
    assert quiet_sink.getvalue() == ""

    sink = io.StringIO()
    RunLogger(sink, debug=True).log_debug_request("yandex-speller", 1, text="x" * 500, lang="en")

    line = sink.getvalue().strip()
    assert line.startswith("[phase] level=DEBUG stage=backend event=request")
    assert "backend=yandex-speller" in line
    assert "request=1" in line
    assert "x" * 126 not in line
    assert "text=" + "x" * 125 + "..." in line
