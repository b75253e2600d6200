"""Check orchestration for typoguard.

Responsibilities:
- Prepare text (ignore markers, markup stripping, normalization) and dispatch it to every
  registered backend under the bounded dispatcher.
- Check files, URLs, and sitemap manifests, turning every per-resource error
  into a `ResourceFailure` value.

Key types:
- `TypoCheckPipeline`: orchestration facade used by the CLI and library callers.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace
from pathlib import Path, PurePosixPath
import asyncio
import time
from urllib.parse import urlsplit

from ..backends.base import BackendRegistry, CheckBackend
from ..errors import ResourceError
from ..io.files import expand_resources, is_sitemap_url, is_url, read_text_file
from ..io.http import HttpFetcher
from ..io.sitemap import parse_sitemap
from ..models.datatypes import (
    BackendOutcome,
    CheckSettings,
    CrawlResult,
    ResourceFailure,
    ResourceReport,
)
from ..telemetry.logger import RunLogger
from ..text.markup import MarkupStripper, detect_format, strip_ignored_text
from ..text.normalizer import TextNormalizer
from .dispatcher import BoundedDispatcher
from .merging import merge_outcomes

ResultCallback = Callable[[CrawlResult], None]


class TypoCheckPipeline:
    """Coordinate text preparation, backend dispatch, and resource checks."""

    def __init__(
        self,
        registry: BackendRegistry,
        *,
        fetcher: HttpFetcher | None = None,
        run_logger: RunLogger | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the pipeline with an explicit backend registry."""

        self._registry = registry
        self._fetcher = fetcher or HttpFetcher()
        self._run_logger = run_logger
        self._clock = clock
        self._markup = MarkupStripper()
        self._normalizer = TextNormalizer()

    @property
    def registry(self) -> BackendRegistry:
        return self._registry

    def prepare_text(self, text: str, settings: CheckSettings) -> str:
        """Drop marked-ignored text, strip markup, and normalize for a resolved format."""

        text = strip_ignored_text(text)
        stripped = self._markup.strip(text, settings.format, settings.ignore_tags)
        return self._normalizer.normalize(stripped, settings.format)

    async def check_text(
        self,
        text: str,
        settings: CheckSettings,
        *,
        extension: str | None = None,
    ) -> BackendOutcome:
        """Check text with every backend and merge their outcomes.

        The format is resolved once here; backends receive a settings value
        derived with `dataclasses.replace`, never a mutated one.
        """

        text_format = detect_format(text, settings.format, extension)
        if text_format != settings.format:
            settings = replace(settings, format=text_format)

        prepared = self.prepare_text(text, settings)
        tasks = [self._backend_task(backend, prepared, settings) for backend in self._registry]
        outcomes = await BoundedDispatcher(settings.max_requests).run(tasks)
        return merge_outcomes(outcomes)

    async def check_file(self, path: Path, settings: CheckSettings) -> CrawlResult:
        """Read and check one local file."""

        resource = str(path)
        self._log_start(resource)
        try:
            text = await asyncio.to_thread(read_text_file, path)
        except ResourceError as exc:
            return self._failure(exc)
        return await self._timed_check(resource, text, settings, path.suffix)

    async def check_url(self, url: str, settings: CheckSettings) -> CrawlResult:
        """Fetch and check one page."""

        self._log_start(url)
        try:
            text = await self._fetcher.fetch_text(url)
        except ResourceError as exc:
            return self._failure(exc)
        return await self._timed_check(url, text, settings, PurePosixPath(urlsplit(url).path).suffix)

    async def check_sitemap(
        self,
        manifest_url: str,
        settings: CheckSettings,
        on_result: ResultCallback | None = None,
    ) -> list[CrawlResult]:
        """Check every page listed in a sitemap manifest.

        `on_result` fires as each page completes (completion order); an
        exception it raises is logged and does not affect other pages. The
        returned list follows manifest order. A manifest that cannot be
        fetched yields one failure; one without recognizable URLs yields an
        empty list.
        """

        try:
            xml_text = await self._fetcher.fetch_text(manifest_url)
        except ResourceError as exc:
            failure = self._failure(exc)
            self._notify(on_result, failure)
            return [failure]

        try:
            urls = parse_sitemap(xml_text, manifest_url)
        except ResourceError as exc:
            if self._run_logger is not None:
                self._run_logger.log_manifest_warning(manifest_url, exc.detail)
            urls = []

        tasks = [self._url_task(url, settings, on_result) for url in urls]
        return await BoundedDispatcher(settings.max_requests).run(tasks)

    async def check_resources(
        self,
        resources: Sequence[str],
        settings: CheckSettings,
        *,
        extensions: Sequence[str] = (),
        on_result: ResultCallback | None = None,
    ) -> list[CrawlResult]:
        """Check a mixed list of files, directories, URLs, and sitemap URLs.

        Directories expand to matching files; a sitemap contributes one result
        per listed page. Results follow input order.
        """

        expanded = expand_resources(resources, extensions)
        tasks = [self._resource_task(resource, settings, on_result) for resource in expanded]
        grouped = await BoundedDispatcher(settings.max_requests).run(tasks)
        return [result for group in grouped for result in group]

    def _backend_task(self, backend: CheckBackend, text: str, settings: CheckSettings):
        """Build the task running one backend; unexpected errors become failures."""

        async def task() -> BackendOutcome:
            try:
                return await backend.check(text, settings)
            except Exception as exc:
                if self._run_logger is not None:
                    self._run_logger.log_backend_failure(
                        backend.descriptor.name, type(exc).__name__
                    )
                return BackendOutcome.failure(f"{backend.descriptor.name}: {exc}")

        return task

    def _url_task(self, url: str, settings: CheckSettings, on_result: ResultCallback | None):
        """Build the task checking one manifest page and reporting it on completion."""

        async def task() -> CrawlResult:
            result = await self.check_url(url, settings)
            self._notify(on_result, result)
            return result

        return task

    def _resource_task(
        self, resource: str, settings: CheckSettings, on_result: ResultCallback | None
    ):
        """Build the task checking one CLI resource."""

        async def task() -> list[CrawlResult]:
            if is_sitemap_url(resource):
                return await self.check_sitemap(resource, settings, on_result)
            if is_url(resource):
                result = await self.check_url(resource, settings)
            else:
                result = await self.check_file(Path(resource), settings)
            self._notify(on_result, result)
            return [result]

        return task

    async def _timed_check(
        self, resource: str, text: str, settings: CheckSettings, extension: str | None
    ) -> CrawlResult:
        """Check fetched text and wrap the outcome with resource identity and timing."""

        started_at = self._clock()
        outcome = await self.check_text(text, settings, extension=extension or None)
        elapsed_millis = int((self._clock() - started_at) * 1000)

        if outcome.failed:
            if self._run_logger is not None:
                self._run_logger.log_resource_failure(resource, "backend")
            return ResourceFailure(
                resource=resource,
                message=f"{resource}: {outcome.error}",
                kind="backend",
            )

        typos = outcome.typos or ()
        if self._run_logger is not None:
            self._run_logger.log_resource_complete(resource, len(typos), elapsed_millis)
        return ResourceReport(resource=resource, typos=typos, elapsed_millis=elapsed_millis)

    def _failure(self, exc: ResourceError) -> ResourceFailure:
        """Convert a resource error into a failure value."""

        if self._run_logger is not None:
            self._run_logger.log_resource_failure(exc.resource, exc.kind)
        return ResourceFailure(resource=exc.resource, message=str(exc), kind=exc.kind)

    def _log_start(self, resource: str) -> None:
        if self._run_logger is not None:
            self._run_logger.log_resource_start(resource)

    def _notify(self, on_result: ResultCallback | None, result: CrawlResult) -> None:
        """Report one result to the caller; a raising callback never aborts the run."""

        if on_result is None:
            return
        try:
            on_result(result)
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_callback_failure(result.resource, type(exc).__name__)
