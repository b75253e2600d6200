"""Error dictionary export.

Responsibilities:
- Collect the distinct offending words of a check run.
- Persist them as a sorted JSON array usable as a project word list.
"""

from __future__ import annotations

from collections.abc import Iterable
import json
from pathlib import Path

from ..models.datatypes import CrawlResult

DEFAULT_DICTIONARY_FILENAME = "typoguard_error_dictionary.json"


def collect_dictionary_words(results: Iterable[CrawlResult]) -> list[str]:
    """Return unique offending words sorted case-insensitively.

    Failed resources and records without a word contribute nothing.
    """

    words: set[str] = set()
    for result in results:
        if result.failed:
            continue
        words.update(typo.word for typo in result.typos if typo.word)
    return sorted(words, key=lambda word: (word.lower(), word))


def write_error_dictionary(results: Iterable[CrawlResult], path: Path) -> Path:
    """Write the error dictionary JSON array and return its path."""

    words = collect_dictionary_words(results)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(words, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return path
