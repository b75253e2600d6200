"""Markup handling ahead of normalization.

Responsibilities:
- Remove text marked with `typoguard ignore` comments before any format handling.
- Resolve the effective text format from an explicit choice, a file extension,
  or content sniffing.
- Convert markdown to HTML, drop comments and ignored tags, strip remaining
  tags, and decode entities.
"""

from __future__ import annotations

from collections.abc import Iterable
import re

from bs4 import BeautifulSoup, Comment
import markdown

from ..models.datatypes import SUPPORTED_FORMATS

_MARKDOWN_EXTENSIONS = frozenset({".md", ".markdown"})
_HTML_EXTENSIONS = frozenset({".htm", ".html", ".xhtml"})
_HTML_SNIFF_PATTERN = re.compile(
    r"<(?:!doctype\s+html|html|head|body|p|div|span|br|a|h[1-6]|ul|ol|li|table)\b[^>]*>",
    re.IGNORECASE,
)

# Markers may sit in HTML, C-style block, or line comments.
_COMMENT_OPEN = r"(?:<!--|/\*|//)"
_COMMENT_CLOSE = r"(?:-->|\*/)?"
_IGNORE_MARKER = re.compile(r"typoguard\s+ignore\b")
_IGNORE_LINE = re.compile(
    rf"^[^\n]*{_COMMENT_OPEN}\s*typoguard\s+ignore\b(?!:)\s*{_COMMENT_CLOSE}[^\n]*(?:\n|\Z)",
    re.MULTILINE,
)
_IGNORE_BLOCK = re.compile(
    rf"{_COMMENT_OPEN}\s*typoguard\s+ignore:start\s*{_COMMENT_CLOSE}"
    rf".*?{_COMMENT_OPEN}\s*typoguard\s+ignore:end\s*{_COMMENT_CLOSE}",
    re.DOTALL,
)


def detect_format(text: str, requested: str = "auto", extension: str | None = None) -> str:
    """Return `plain`, `html`, or `markdown` for one resource.

    An explicit `requested` format wins; `auto` falls back to the file
    extension and then to sniffing common HTML tags.
    """

    if requested in SUPPORTED_FORMATS:
        return requested
    if requested != "auto":
        raise ValueError(f"Unsupported format `{requested}`.")

    suffix = (extension or "").lower()
    if suffix in _MARKDOWN_EXTENSIONS:
        return "markdown"
    if suffix in _HTML_EXTENSIONS:
        return "html"
    if _HTML_SNIFF_PATTERN.search(text):
        return "html"
    return "plain"


def strip_ignored_text(text: str) -> str:
    """Remove lines and blocks marked with `typoguard ignore` comments.

    A line holding a `typoguard ignore` comment is dropped whole. Text from a
    `typoguard ignore:start` comment through the next `typoguard ignore:end`
    comment is replaced by a space; an unterminated start marker is kept.
    """

    if not _IGNORE_MARKER.search(text):
        return text
    text = _IGNORE_LINE.sub("", text)
    return _IGNORE_BLOCK.sub(" ", text)


class MarkupStripper:
    """Reduce HTML or markdown input to checkable text."""

    def strip(self, text: str, text_format: str, ignore_tags: Iterable[str] = ()) -> str:
        """Return detagged text; plain input is returned unchanged."""

        if text_format == "plain":
            return text
        if text_format == "markdown":
            text = markdown.markdown(text)

        soup = BeautifulSoup(text, "html.parser")
        for comment in soup.find_all(string=lambda node: isinstance(node, Comment)):
            comment.extract()
        for tag_name in ignore_tags:
            for element in soup.find_all(tag_name):
                element.decompose()
        return soup.get_text(" ")
