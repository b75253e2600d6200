"""Unit tests for shared CLI, environment, and YAML parsing helpers."""

import pytest

from typoguard.parsing import (
    normalize_extension,
    normalize_optional_string,
    parse_csv_tokens,
    parse_permissive_boolean,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None
    assert normalize_optional_string("  value  ") == "value"


@pytest.mark.parametrize(
    ("token", "expected"),
    [("TrUe", True), ("  ON ", True), ("FALSE", False), ("nO", False), (True, True)],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(
    token: object, expected: bool
) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


def test_parse_csv_tokens_splits_strips_and_deduplicates() -> None:
    """CSV parsing keeps first-seen order and drops blanks and repeats."""

    assert parse_csv_tokens(" en, ru ,,en ") == ("en", "ru")
    assert parse_csv_tokens(["code", " pre ", "code"]) == ("code", "pre")
    assert parse_csv_tokens(None) == ()


def test_normalize_extension_adds_leading_dot_and_lowercases() -> None:
    """Extensions are compared in `.ext` lower-case form."""

    assert normalize_extension("MD") == ".md"
    assert normalize_extension(" .Html ") == ".html"
