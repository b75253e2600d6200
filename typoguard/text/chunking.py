"""Text-to-chunk segmentation for backends with input-size limits.

Responsibilities:
- Split text into pieces no longer than a backend's maximum input length.
- Prefer whitespace boundaries and keep exact reassembly (`"".join(pieces) == text`).
"""

from __future__ import annotations


class Chunker:
    """Split text at whitespace near each window end, hard-cutting as a last resort."""

    _BOUNDARY_CHARACTERS = frozenset({" ", "\n", "\t"})
    _LOOKBACK_DIVISOR = 20

    def split(self, text: str, max_len: int) -> list[str]:
        """Split text into bounded pieces.

        Args:
            text: Text to split.
            max_len: Maximum piece length in characters.

        Returns:
            Ordered pieces whose concatenation equals `text`.
        """

        if max_len < 1:
            raise ValueError("`max_len` must be a positive integer.")

        pieces: list[str] = []
        start = 0
        text_length = len(text)
        while start < text_length:
            if start + max_len >= text_length:
                pieces.append(text[start:])
                break
            end = self._resolve_boundary(text, start + max_len, max_len)
            pieces.append(text[start:end])
            start = end
        return pieces

    def _resolve_boundary(self, text: str, window_end: int, max_len: int) -> int:
        """Return the split index for a window ending at `window_end`.

        The found whitespace becomes the first character of the next piece.
        """

        depth = max_len // self._LOOKBACK_DIVISOR
        for index in range(window_end - 1, window_end - depth - 1, -1):
            if text[index] in self._BOUNDARY_CHARACTERS:
                return index
        return window_end


def split_text(text: str, max_len: int) -> list[str]:
    """Module-level shortcut for `Chunker().split`."""

    return Chunker().split(text, max_len)
