"""Unit tests for error dictionary export."""

from __future__ import annotations

import json
from pathlib import Path

from typoguard.models.datatypes import ResourceFailure, ResourceReport, TypoRecord
from typoguard.report.dictionary import collect_dictionary_words, write_error_dictionary


def _report(*words: str | None) -> ResourceReport:
    return ResourceReport(
        resource="page",
        typos=tuple(TypoRecord(code=1, word=word) for word in words),
        elapsed_millis=1,
    )


def test_collect_dictionary_words_sorts_case_insensitively_without_duplicates() -> None:
    """Words from all successful resources are merged, unique, and sorted."""

    results = [
        _report("zebra", "Apple", None),
        ResourceFailure(resource="gone", message="gone: does not exist"),
        _report("apple", "Apple", "ёлка"),
    ]

    assert collect_dictionary_words(results) == ["Apple", "apple", "zebra", "ёлка"]


def test_write_error_dictionary_writes_utf8_json_array(tmp_path: Path) -> None:
    """The dictionary is a readable JSON array with non-ASCII kept as-is."""

    path = tmp_path / "reports" / "typoguard_error_dictionary.json"

    written = write_error_dictionary([_report("еще", "teh")], path)

    assert written == path
    content = path.read_text(encoding="utf-8")
    assert "еще" in content
    assert json.loads(content) == ["teh", "еще"]
