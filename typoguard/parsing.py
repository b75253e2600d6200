"""Shared parsing helpers for CLI, environment, and YAML value normalization."""

from __future__ import annotations

from collections.abc import Iterable


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_csv_tokens(value: object) -> tuple[str, ...]:
    """Split comma-separated text (or an iterable of strings) into unique tokens.

    Blank tokens are dropped; first-seen order is kept.
    """

    if value is None:
        return ()
    if isinstance(value, str):
        raw_tokens: Iterable[object] = value.split(",")
    elif isinstance(value, Iterable):
        raw_tokens = value
    else:
        raw_tokens = [value]

    tokens: list[str] = []
    for raw in raw_tokens:
        token = normalize_optional_string(raw)
        if token is not None and token not in tokens:
            tokens.append(token)
    return tuple(tokens)


def normalize_extension(value: str) -> str:
    """Return a lower-case file extension with a leading dot."""

    token = value.strip().lower()
    if token and not token.startswith("."):
        token = f".{token}"
    return token
