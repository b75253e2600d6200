"""Unit tests for the explicit backend registry and default factory."""

from __future__ import annotations

from pathlib import Path

import pytest

from typoguard.backend_factory import BackendFactory, build_default_registry
from typoguard.backends.base import BackendRegistry
from typoguard.config import TypoguardConfig
from typoguard.errors import PipelineStageError

from tests.backend_stubs import StubBackend


def test_registry_keeps_order_and_looks_up_by_name() -> None:
    """Backends iterate in registration order and resolve by descriptor name."""

    first = StubBackend(name="first")
    second = StubBackend(name="second")
    registry = BackendRegistry([first, second])

    assert list(registry) == [first, second]
    assert len(registry) == 2
    assert registry.get("second") is second
    assert [descriptor.name for descriptor in registry.descriptors()] == ["first", "second"]
    with pytest.raises(KeyError):
        registry.get("missing")


def test_registry_rejects_duplicate_names() -> None:
    """Two backends with one name are a configuration error."""

    with pytest.raises(ValueError, match="Duplicate backend name"):
        BackendRegistry([StubBackend(name="dup"), StubBackend(name="dup")])


def test_default_registry_builds_speller_then_yo_backend() -> None:
    """The default stack registers the speller and the Yo linter."""

    config = TypoguardConfig(speller_url="https://speller.test/checkText", timeout_seconds=3)

    registry = build_default_registry(config)

    assert [descriptor.name for descriptor in registry.descriptors()] == ["yandex-speller", "yo"]
    speller = registry.get("yandex-speller")
    assert speller._client.url == "https://speller.test/checkText"
    assert speller._client.timeout_seconds == 3


def test_yo_factory_reports_unreadable_custom_dictionary(tmp_path: Path) -> None:
    """A missing custom Yo dictionary maps to a config stage error."""

    config = TypoguardConfig(yo_dictionary=tmp_path / "missing.txt")

    with pytest.raises(PipelineStageError, match="Could not read Yo dictionary") as exc_info:
        BackendFactory.create_yo_linter(config)

    assert exc_info.value.stage == "config"
