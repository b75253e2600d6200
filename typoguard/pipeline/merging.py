"""Outcome merging with first-failure short-circuit."""

from __future__ import annotations

from collections.abc import Iterable

from ..models.datatypes import BackendOutcome, TypoRecord


def merge_outcomes(outcomes: Iterable[BackendOutcome]) -> BackendOutcome:
    """Merge backend or chunk outcomes into one.

    The first failed outcome is returned as-is and later outcomes are
    discarded. Without failures, typo sequences are concatenated in
    submission order.
    """

    collected = list(outcomes)
    for outcome in collected:
        if outcome.failed:
            return outcome

    typos: list[TypoRecord] = []
    for outcome in collected:
        typos.extend(outcome.typos or ())
    return BackendOutcome.ok(typos)
