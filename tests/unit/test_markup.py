"""Unit tests for format detection and markup stripping."""

from __future__ import annotations

import pytest

from typoguard.text.markup import MarkupStripper, detect_format, strip_ignored_text
from typoguard.text.normalizer import normalize_text


@pytest.mark.parametrize(
    ("text", "requested", "extension", "expected"),
    [
        ("<p>hi</p>", "plain", ".html", "plain"),
        ("# Title", "auto", ".md", "markdown"),
        ("# Title", "auto", ".MARKDOWN", "markdown"),
        ("text", "auto", ".xhtml", "html"),
        ("<!DOCTYPE html><p>hi</p>", "auto", None, "html"),
        ("a < b and c > d", "auto", None, "plain"),
        ("just words", "auto", ".txt", "plain"),
    ],
)
def test_detect_format_resolves_requested_extension_and_content(
    text: str, requested: str, extension: str | None, expected: str
) -> None:
    """Explicit formats win; `auto` uses the extension, then HTML sniffing."""

    assert detect_format(text, requested, extension) == expected


def test_detect_format_rejects_unknown_format() -> None:
    """Unsupported format names should fail clearly."""

    with pytest.raises(ValueError, match="Unsupported format `rtf`"):
        detect_format("text", "rtf")


def test_strip_html_drops_ignored_tags_and_comments_and_decodes_entities() -> None:
    """Ignored tags and comments are removed before text extraction."""

    html = (
        "<html><head><style>p { color: red }</style></head><body>"
        "<p>Fish &amp; chips</p><!-- hidden note -->"
        "<script>var teh = 1;</script><code>teh()</code>"
        "</body></html>"
    )

    stripped = MarkupStripper().strip(html, "html", ("code", "script", "style"))

    assert normalize_text(stripped) == "Fish & chips"


def test_strip_markdown_renders_and_ignores_code() -> None:
    """Markdown is rendered first so inline code can be ignored like HTML."""

    text = "# Heading\n\nUse `teh_function` here."

    stripped = normalize_text(MarkupStripper().strip(text, "markdown", ("code",)))

    assert "Heading" in stripped
    assert "Use" in stripped and "here." in stripped
    assert "teh_function" not in stripped
    assert "#" not in stripped


def test_strip_plain_returns_text_unchanged() -> None:
    """Plain text is never parsed as markup."""

    text = "a <b>not markup</b> here"

    assert MarkupStripper().strip(text, "plain", ("b",)) == text


@pytest.mark.parametrize(
    "marked_line",
    [
        "Teh draft line <!-- typoguard ignore -->",
        "var teh = 1; // typoguard ignore",
        "/* typoguard ignore */ teh()",
    ],
)
def test_strip_ignored_text_drops_marked_lines(marked_line: str) -> None:
    """A line carrying an ignore comment disappears; neighbours stay intact."""

    text = f"First line.\n{marked_line}\nLast line."

    assert strip_ignored_text(text) == "First line.\nLast line."


def test_strip_ignored_text_drops_marked_blocks() -> None:
    """Everything between start and end markers is removed, markers included."""

    text = (
        "Intro.\n"
        "<!-- typoguard ignore:start -->\n"
        "Teh first\nteh second\n"
        "<!-- typoguard ignore:end -->\n"
        "Outro. /* typoguard ignore:start */ tehh /* typoguard ignore:end */ done"
    )

    stripped = normalize_text(strip_ignored_text(text))

    assert stripped == "Intro.\nOutro. done"


def test_strip_ignored_text_keeps_unmarked_and_unterminated_text() -> None:
    """Text without markers, or with an unclosed block, is left as is."""

    plain = "Nothing to ignore here; ignore is just a word."
    unterminated = "Keep <!-- typoguard ignore:start --> this teh"

    assert strip_ignored_text(plain) == plain
    assert strip_ignored_text(unterminated) == unterminated
