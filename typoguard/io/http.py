"""HTTP page and manifest fetching.

Responsibilities:
- Fetch text over HTTP without blocking the event loop.
- Decode bodies as UTF-8 unless the response declares a charset.
- Map status, transport, and decoding failures to `ResourceError` values.
"""

from __future__ import annotations

import asyncio
import re

import requests

from ..errors import ResourceError

_CHARSET_PATTERN = re.compile(r"charset\s*=\s*[\"']?([\w.:-]+)", re.IGNORECASE)


def declared_charset(content_type: str) -> str | None:
    """Return the charset named in a Content-Type header, if any."""

    match = _CHARSET_PATTERN.search(content_type)
    if match is None:
        return None
    return match.group(1).lower()


class HttpFetcher:
    """Requests-based GET client run in a worker thread."""

    def __init__(self, *, timeout_seconds: float = 60.0) -> None:
        """Initialize fetch timeout settings."""

        self.timeout_seconds = timeout_seconds

    async def fetch_text(self, url: str) -> str:
        """Return the decoded body of a successful (2xx) response."""

        return await asyncio.to_thread(self._get_text, url)

    def _get_text(self, url: str) -> str:
        """Perform one blocking GET request."""

        try:
            response = requests.get(url, timeout=self.timeout_seconds)
        except requests.Timeout as exc:
            raise ResourceError(resource=url, detail="request timed out", kind="transport") from exc
        except requests.RequestException as exc:
            raise ResourceError(resource=url, detail=str(exc), kind="transport") from exc

        if not 200 <= response.status_code < 300:
            raise ResourceError(
                resource=url,
                detail=f"returned status code {response.status_code}",
                kind="transport",
            )
        return self._decode_body(url, response)

    @staticmethod
    def _decode_body(url: str, response: requests.Response) -> str:
        """Decode raw body bytes; requests would guess ISO-8859-1 for bare `text/*`."""

        charset = declared_charset(response.headers.get("Content-Type", ""))
        encoding = charset or "utf-8"
        try:
            return bytes(response.content).decode(encoding)
        except LookupError as exc:
            raise ResourceError(
                resource=url,
                detail=f"declares unknown charset {charset}",
                kind="input",
            ) from exc
        except UnicodeDecodeError as exc:
            raise ResourceError(
                resource=url,
                detail=f"is not valid {encoding}",
                kind="input",
            ) from exc
