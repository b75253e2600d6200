"""Shared pytest fixtures for the typoguard test suite."""

from __future__ import annotations

import pytest

from typoguard.models.datatypes import TYPO_CODE_UNKNOWN_WORD, CheckSettings

from tests.backend_stubs import StubBackend


@pytest.fixture
def settings() -> CheckSettings:
    """Provide plain-text settings with the default concurrency ceiling."""

    return CheckSettings(format="plain", languages=("en",))


@pytest.fixture
def teh_backend() -> StubBackend:
    """Provide a stub backend that flags `Teh` and `teh` as unknown words."""

    return StubBackend(
        {
            "Teh": (TYPO_CODE_UNKNOWN_WORD, ("The",)),
            "teh": (TYPO_CODE_UNKNOWN_WORD, ("the",)),
        }
    )
