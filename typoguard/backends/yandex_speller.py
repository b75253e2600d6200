"""Remote spelling backend built on the Yandex Speller API.

Responsibilities:
- Split long text into API-sized chunks.
- Dispatch one request per chunk under the shared concurrency ceiling.
- Merge chunk outcomes with first-failure short-circuit.
"""

from __future__ import annotations

import asyncio

from ..models.datatypes import BackendDescriptor, BackendOutcome, CheckSettings
from ..pipeline.dispatcher import BoundedDispatcher
from ..pipeline.merging import merge_outcomes
from ..telemetry.logger import RunLogger
from ..text.chunking import Chunker
from .speller_client import SpellerServiceError, YandexSpellerClient, options_bitmask

MAX_TEXT_LENGTH = 10000


class YandexSpellerBackend:
    """Check text against the remote speller, one request per chunk."""

    descriptor = BackendDescriptor(
        name="yandex-speller",
        description="Yandex Speller spelling service",
        languages=("ru", "uk", "en"),
        formats=("plain", "html", "markdown"),
    )

    def __init__(
        self,
        client: YandexSpellerClient | None = None,
        *,
        chunker: Chunker | None = None,
        max_text_length: int = MAX_TEXT_LENGTH,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize the backend with an HTTP client and chunking policy."""

        self._client = client or YandexSpellerClient()
        self._chunker = chunker or Chunker()
        self._max_text_length = max_text_length
        self._run_logger = run_logger

    async def check(self, text: str, settings: CheckSettings) -> BackendOutcome:
        """Check text and return merged chunk outcomes."""

        if not text:
            return BackendOutcome.ok()

        try:
            options = options_bitmask(settings.options)
        except ValueError as exc:
            return BackendOutcome.failure(str(exc))

        chunks = self._chunker.split(text, self._max_text_length)
        tasks = [
            self._chunk_task(chunk, index, options, settings)
            for index, chunk in enumerate(chunks)
        ]
        outcomes = await BoundedDispatcher(settings.max_requests).run(tasks)
        return merge_outcomes(outcomes)

    def _chunk_task(self, chunk: str, index: int, options: int, settings: CheckSettings):
        """Build the zero-argument task checking one chunk."""

        async def task() -> BackendOutcome:
            if self._run_logger is not None:
                self._run_logger.log_debug_request(
                    self.descriptor.name,
                    index,
                    format=settings.format,
                    lang=",".join(settings.languages),
                    options=options,
                    text=chunk,
                )
            try:
                typos = await asyncio.to_thread(
                    self._client.check_text,
                    text=chunk,
                    languages=settings.languages,
                    text_format=settings.format,
                    options=options,
                )
            except SpellerServiceError as exc:
                if self._run_logger is not None:
                    self._run_logger.log_backend_failure(self.descriptor.name, exc.failure_kind)
                return BackendOutcome.failure(str(exc))
            return BackendOutcome.ok(typos)

        return task
