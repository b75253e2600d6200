"""Text preprocessing and segmentation components.

This package provides markup stripping, normalization, and chunking building
blocks used before backend checks.
"""

from .chunking import Chunker, split_text
from .markup import MarkupStripper, detect_format, strip_ignored_text
from .normalizer import TextNormalizer, normalize_text

__all__ = [
    "Chunker",
    "MarkupStripper",
    "TextNormalizer",
    "detect_format",
    "normalize_text",
    "split_text",
    "strip_ignored_text",
]
