"""Text normalization stage.

Responsibilities:
- Unify line endings and collapse redundant whitespace before backend checks.
- Keep normalization pure and idempotent.
"""

from __future__ import annotations

import re


class TextNormalizer:
    """Normalize detagged text into the canonical form sent to backends."""

    _WINDOWS_LINE_END = re.compile(r"\r\n")
    _MAC_LINE_END = re.compile(r"\r")
    _TRAILING_SPACES = re.compile(r"[^\S\n]+\n")
    _REPEATED_SPACES = re.compile(r"[^\S\n]+")
    _REPEATED_LINE_ENDS = re.compile(r"\n+")

    def normalize(self, text: str, text_format: str = "plain") -> str:
        """Normalize text for downstream checks.

        `text_format` is accepted for call-site symmetry; markup is already
        stripped by the time text reaches this stage.
        """

        _ = text_format
        text = self._WINDOWS_LINE_END.sub("\n", text)
        text = self._MAC_LINE_END.sub("\n", text)
        text = self._TRAILING_SPACES.sub("\n", text)
        text = self._REPEATED_SPACES.sub(" ", text)
        text = self._REPEATED_LINE_ENDS.sub("\n", text)
        return text.strip()


def normalize_text(text: str, text_format: str = "plain") -> str:
    """Module-level shortcut for `TextNormalizer().normalize`."""

    return TextNormalizer().normalize(text, text_format)
