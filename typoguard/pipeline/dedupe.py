"""Typo deduplication for reports.

Responsibilities:
- Collapse repeated `(code, word)` occurrences into one record with a count.
- Order grouped records by code (first seen) and word (case-insensitive).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from ..models.datatypes import TypoRecord


def remove_duplicates(typos: Iterable[TypoRecord]) -> list[TypoRecord]:
    """Return unique typo records with summed occurrence counts.

    Records without a word pass through unmerged, ahead of grouped records.
    Grouping is case-sensitive while ordering within a code is
    case-insensitive, with ties kept in first-seen order. The first
    occurrence's suggestions are kept for each group.
    """

    passthrough: list[TypoRecord] = []
    groups: dict[int, dict[str, TypoRecord]] = {}

    for typo in typos:
        if not typo.word:
            passthrough.append(typo)
            continue

        occurrences = typo.count if typo.count > 0 else 1
        by_word = groups.setdefault(typo.code, {})
        existing = by_word.get(typo.word)
        if existing is None:
            by_word[typo.word] = replace(typo, count=occurrences)
        else:
            by_word[typo.word] = replace(existing, count=existing.count + occurrences)

    result = list(passthrough)
    for by_word in groups.values():
        result.extend(sorted(by_word.values(), key=lambda record: (record.word or "").lower()))
    return result
