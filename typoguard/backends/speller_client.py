"""Yandex Speller HTTP client.

Responsibilities:
- Send `checkText` requests to the Yandex Speller JSON API.
- Convert JSON error items into `TypoRecord` values.
- Raise actionable service exceptions for backend-level failure mapping.
"""

from __future__ import annotations

import json
import socket
from collections.abc import Mapping
from typing import Any

import requests

from ..models.datatypes import TypoRecord

DEFAULT_SPELLER_URL = "https://speller.yandex.net/services/spellservice.json/checkText"

SPELLER_OPTION_FLAGS: Mapping[str, int] = {
    "ignore_uppercase": 1,
    "ignore_digits": 2,
    "ignore_urls": 4,
    "find_repeat_words": 8,
    "ignore_latin": 16,
    "no_suggest": 32,
    "flag_latin": 128,
    "by_words": 256,
    "ignore_capitalization": 512,
    "ignore_roman_numerals": 2048,
}


class SpellerServiceError(RuntimeError):
    """Raised when a speller request fails or returns a malformed payload."""

    def __init__(
        self,
        message: str,
        *,
        failure_kind: str = "unknown",
        status_code: int | None = None,
    ) -> None:
        """Initialize service error metadata for backend diagnostics."""

        super().__init__(message)
        self.failure_kind = failure_kind
        self.status_code = status_code


def options_bitmask(options: Mapping[str, object]) -> int:
    """Fold named boolean speller options into the API bitmask.

    Unknown names raise `ValueError`; falsy values are skipped.
    """

    mask = 0
    for name, enabled in options.items():
        flag = SPELLER_OPTION_FLAGS.get(name)
        if flag is None:
            supported = ", ".join(sorted(SPELLER_OPTION_FLAGS))
            raise ValueError(f"Unknown speller option `{name}`; supported: {supported}.")
        if enabled:
            mask |= flag
    return mask


def api_format(text_format: str) -> str:
    """Map a text format to the speller API format."""

    return "html" if text_format in {"html", "markdown"} else "plain"


class YandexSpellerClient:
    """Minimal requests-based client for the speller `checkText` endpoint."""

    _MAX_SERVICE_MESSAGE_CHARS = 180

    def __init__(
        self,
        *,
        url: str = DEFAULT_SPELLER_URL,
        timeout_seconds: float = 60.0,
    ) -> None:
        """Initialize speller HTTP settings."""

        self.url = url
        self.timeout_seconds = timeout_seconds

    def check_text(
        self,
        *,
        text: str,
        languages: tuple[str, ...],
        text_format: str,
        options: int = 0,
    ) -> list[TypoRecord]:
        """Return typo records reported for one text chunk."""

        data = {
            "text": text,
            "lang": ",".join(languages),
            "format": api_format(text_format),
            "options": str(options),
        }
        try:
            response = requests.post(self.url, data=data, timeout=self.timeout_seconds)
            response.raise_for_status()
            raw_payload = bytes(response.content).decode("utf-8")
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else 0
            raise SpellerServiceError(
                f"Speller request failed (HTTP {status_code}).",
                failure_kind="http_error",
                status_code=status_code,
            ) from exc
        except requests.RequestException as exc:
            failure_kind = self._classify_transport_failure(exc)
            if failure_kind == "timeout":
                detail = "Speller request timed out."
            else:
                detail = f"Speller request transport error: {self._short_message(str(exc))}"
            raise SpellerServiceError(detail, failure_kind=failure_kind) from exc
        except UnicodeDecodeError as exc:
            raise SpellerServiceError(
                "Speller returned a non-UTF-8 payload.", failure_kind="payload"
            ) from exc

        return self._parse_typos(raw_payload)

    @classmethod
    def _parse_typos(cls, raw_payload: str) -> list[TypoRecord]:
        """Convert a `checkText` JSON array into typo records."""

        try:
            payload = json.loads(raw_payload)
        except json.JSONDecodeError as exc:
            raise SpellerServiceError(
                "Speller returned invalid JSON payload.", failure_kind="payload"
            ) from exc

        if not isinstance(payload, list):
            raise SpellerServiceError(
                "Speller response must be a JSON array.", failure_kind="payload"
            )
        return [cls._typo_from_item(item) for item in payload]

    @staticmethod
    def _typo_from_item(item: Any) -> TypoRecord:
        """Convert one speller error item into a typo record."""

        if not isinstance(item, dict) or not isinstance(item.get("code"), int):
            raise SpellerServiceError(
                "Speller response item is malformed.", failure_kind="payload"
            )
        word = item.get("word")
        suggestions = item.get("s")
        return TypoRecord(
            code=item["code"],
            word=word if isinstance(word, str) and word else None,
            suggestions=tuple(s for s in suggestions if isinstance(s, str))
            if isinstance(suggestions, list)
            else (),
            count=1,
        )

    @staticmethod
    def _classify_transport_failure(reason: object) -> str:
        """Classify network-layer failures into deterministic diagnostic kinds."""

        if isinstance(reason, TimeoutError | socket.timeout | requests.Timeout):
            return "timeout"
        return "transport"

    @classmethod
    def _short_message(cls, text: str) -> str:
        """Normalize and cap user-facing service message length."""

        compact = " ".join(text.split())
        if len(compact) <= cls._MAX_SERVICE_MESSAGE_CHARS:
            return compact
        return f"{compact[: cls._MAX_SERVICE_MESSAGE_CHARS - 1]}..."
