"""Backend factory helpers for the default check stack.

Responsibilities:
- Build the concrete speller and Yo backends from runtime configuration.
- Keep orchestration independent from concrete backend construction.
"""

from __future__ import annotations

from .backends.base import BackendRegistry
from .backends.speller_client import YandexSpellerClient
from .backends.yandex_speller import YandexSpellerBackend
from .backends.yo_linter import YoDictionary, YoLinterBackend
from .config import TypoguardConfig
from .errors import PipelineStageError
from .telemetry.logger import RunLogger


class BackendFactory:
    """Factory for the backends registered by the CLI."""

    @staticmethod
    def create_speller(
        config: TypoguardConfig,
        run_logger: RunLogger | None = None,
    ) -> YandexSpellerBackend:
        """Create the remote speller backend for configured endpoint and timeout."""

        client = YandexSpellerClient(
            url=config.speller_url,
            timeout_seconds=config.timeout_seconds,
        )
        return YandexSpellerBackend(client, run_logger=run_logger)

    @staticmethod
    def create_yo_linter(config: TypoguardConfig) -> YoLinterBackend:
        """Create the Yo linter with a custom or bundled dictionary."""

        if config.yo_dictionary is None:
            return YoLinterBackend(YoDictionary.bundled())
        try:
            dictionary = YoDictionary.from_file(config.yo_dictionary)
        except (OSError, UnicodeDecodeError) as exc:
            raise PipelineStageError(
                stage="config",
                detail=f"Could not read Yo dictionary `{config.yo_dictionary}`: {exc}",
                hint="Point `yo_dictionary` at a UTF-8 file with one word per line.",
            ) from exc
        return YoLinterBackend(dictionary)


def build_default_registry(
    config: TypoguardConfig,
    run_logger: RunLogger | None = None,
) -> BackendRegistry:
    """Return the speller and Yo backends in reporting order."""

    return BackendRegistry(
        [
            BackendFactory.create_speller(config, run_logger),
            BackendFactory.create_yo_linter(config),
        ]
    )
