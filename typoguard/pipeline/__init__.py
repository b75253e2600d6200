"""typoguard pipeline package.

This package contains the bounded dispatcher, outcome merging,
deduplication, and the orchestration facade for text, file, URL, and
sitemap checks.
"""

from .dedupe import remove_duplicates
from .dispatcher import BoundedDispatcher, run_bounded
from .merging import merge_outcomes
from .orchestrator import TypoCheckPipeline

__all__ = [
    "BoundedDispatcher",
    "TypoCheckPipeline",
    "merge_outcomes",
    "remove_duplicates",
    "run_bounded",
]
