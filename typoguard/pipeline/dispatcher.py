"""Bounded-concurrency task runner.

Responsibilities:
- Run asynchronous tasks with a hard ceiling on in-flight work.
- Return outcomes in submission order regardless of completion order.
- Run every task to completion; one failing task never cancels its siblings.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

_Outcome = TypeVar("_Outcome")

Task = Callable[[], Awaitable[_Outcome]]


class BoundedDispatcher:
    """Worker-pool style runner with a fixed number of concurrent tasks."""

    def __init__(self, limit: int) -> None:
        """Initialize the dispatcher with a concurrency ceiling of at least 1."""

        if limit < 1:
            raise ValueError("Dispatcher `limit` must be a positive integer.")
        self.limit = limit

    async def run(self, tasks: Sequence[Task[_Outcome]]) -> list[_Outcome]:
        """Run `tasks` and return their outcomes by submission index.

        Tasks are zero-argument callables returning awaitables, so nothing
        starts before a worker picks it up. If any task raises, the remaining
        tasks still run and the lowest-index exception is re-raised afterwards.
        """

        if not tasks:
            return []

        results: list[_Outcome | None] = [None] * len(tasks)
        errors: dict[int, Exception] = {}
        pending = iter(enumerate(tasks))

        async def worker() -> None:
            for index, task in pending:
                try:
                    results[index] = await task()
                except Exception as exc:
                    errors[index] = exc

        worker_count = min(self.limit, len(tasks))
        await asyncio.gather(*(worker() for _ in range(worker_count)))

        if errors:
            raise errors[min(errors)]
        return results  # type: ignore[return-value]


async def run_bounded(tasks: Sequence[Task[_Outcome]], limit: int) -> list[_Outcome]:
    """Run tasks through a fresh `BoundedDispatcher`."""

    return await BoundedDispatcher(limit).run(tasks)
