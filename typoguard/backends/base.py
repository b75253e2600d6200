"""Backend contract and explicit registry.

Responsibilities:
- Define the asynchronous check capability every backend implements.
- Hold a constructed, ordered set of backends passed into the pipeline.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol

from ..models.datatypes import BackendDescriptor, BackendOutcome, CheckSettings


class CheckBackend(Protocol):
    """Protocol for pluggable typo-checking backends.

    Implementations return `BackendOutcome.failure(...)` instead of raising
    for recoverable errors and an empty outcome for clean text.
    """

    descriptor: BackendDescriptor

    async def check(self, text: str, settings: CheckSettings) -> BackendOutcome:
        """Check one normalized text."""


class BackendRegistry:
    """Ordered collection of backends used by one pipeline instance."""

    def __init__(self, backends: Iterable[CheckBackend]) -> None:
        """Initialize the registry and reject duplicate backend names."""

        self._backends: tuple[CheckBackend, ...] = tuple(backends)
        names = [backend.descriptor.name for backend in self._backends]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate backend name(s): {', '.join(duplicates)}.")

    def __iter__(self) -> Iterator[CheckBackend]:
        return iter(self._backends)

    def __len__(self) -> int:
        return len(self._backends)

    def descriptors(self) -> list[BackendDescriptor]:
        """Return backend descriptors in registry order."""

        return [backend.descriptor for backend in self._backends]

    def get(self, name: str) -> CheckBackend:
        """Return the backend registered under `name`."""

        for backend in self._backends:
            if backend.descriptor.name == name:
                return backend
        raise KeyError(name)
