"""Unit tests for whitespace and line-ending normalization."""

from __future__ import annotations

import pytest

from typoguard.text.normalizer import TextNormalizer, normalize_text


def test_normalizer_collapses_blank_lines_and_repeated_spaces() -> None:
    """Runs of blank lines and inline spaces should collapse to single separators."""

    assert normalize_text("Teh quick fox.\n\n\nJumps   over.") == "Teh quick fox.\nJumps over."


def test_normalizer_unifies_line_endings_and_trims_trailing_spaces() -> None:
    """CRLF and CR endings become LF and spaces before a line end are dropped."""

    text = "  first line  \r\nsecond\tline \rthird  "

    assert TextNormalizer().normalize(text) == "first line\nsecond line\nthird"


def test_normalizer_keeps_unicode_letters_and_punctuation() -> None:
    """Only whitespace is touched; letters and punctuation pass through."""

    assert normalize_text("Ёлка — это ель!") == "Ёлка — это ель!"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "Teh quick fox.\n\n\nJumps   over.",
        "a \n \n b\r\n\r\nc",
        "\t\ttabs\tand  spaces \n",
        "line\n\n\n",
    ],
)
def test_normalizer_is_idempotent(text: str) -> None:
    """Normalizing twice should equal normalizing once."""

    once = normalize_text(text)

    assert normalize_text(once) == once
