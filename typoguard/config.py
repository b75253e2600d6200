"""Configuration model and loaders for typoguard.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Build the immutable `CheckSettings` value shared by one check run.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `TypoguardConfig`: normalized runtime settings for a check run.
- `ConfigLoader`: static construction helpers for `TypoguardConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .backends.speller_client import DEFAULT_SPELLER_URL, SPELLER_OPTION_FLAGS
from .models.datatypes import CheckSettings
from .parsing import (
    normalize_extension,
    normalize_optional_string,
    parse_csv_tokens,
    parse_permissive_boolean,
)

DEFAULT_LANGUAGES = ("en", "ru")
DEFAULT_IGNORE_TAGS = ("code", "kbd", "object", "samp", "script", "style", "var")
DEFAULT_FILE_EXTENSIONS = (".md", ".markdown", ".htm", ".html", ".txt")
DEFAULT_MAX_REQUESTS = 2
DEFAULT_TIMEOUT_SECONDS = 60.0
SUPPORTED_CONFIG_FORMATS = frozenset({"auto", "plain", "html", "markdown"})


@dataclass(slots=True)
class TypoguardConfig:
    """Runtime configuration for one check run.

    Attributes:
        format: Input format, or `auto` to resolve per resource.
        languages: Ordered language codes passed to backends.
        options: Named speller option flags.
        max_requests: Concurrency ceiling for resources, backends, and chunks.
        ignore_tags: Markup tags whose content is not checked.
        check_yo: Whether the letter-Yo linter runs.
        file_extensions: Extensions picked up when a directory is checked.
        yo_dictionary: Optional replacement for the bundled Yo dictionary.
        speller_url: Speller `checkText` endpoint.
        timeout_seconds: Per-request HTTP timeout.
        dictionary_report: Optional path of the JSON error dictionary.
    """

    format: str = "auto"
    languages: tuple[str, ...] = DEFAULT_LANGUAGES
    options: dict[str, bool] = field(default_factory=dict)
    max_requests: int = DEFAULT_MAX_REQUESTS
    ignore_tags: tuple[str, ...] = DEFAULT_IGNORE_TAGS
    check_yo: bool = False
    file_extensions: tuple[str, ...] = DEFAULT_FILE_EXTENSIONS
    yo_dictionary: Path | None = None
    speller_url: str = DEFAULT_SPELLER_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    dictionary_report: Path | None = None

    def validate(self) -> None:
        """Validate runtime configuration values before a check run."""

        if self.format not in SUPPORTED_CONFIG_FORMATS:
            supported = ", ".join(sorted(SUPPORTED_CONFIG_FORMATS))
            raise ValueError(f"Unsupported `format` value `{self.format}`; supported: {supported}.")
        if not self.languages:
            raise ValueError("`languages` must list at least one language code.")
        if self.max_requests <= 0:
            raise ValueError("`max_requests` must be a positive integer.")
        if self.timeout_seconds <= 0:
            raise ValueError("`timeout_seconds` must be a positive number.")
        unknown = sorted(set(self.options).difference(SPELLER_OPTION_FLAGS))
        if unknown:
            supported = ", ".join(sorted(SPELLER_OPTION_FLAGS))
            raise ValueError(
                f"Unknown speller option(s): {', '.join(unknown)}; supported: {supported}."
            )
        if normalize_optional_string(self.speller_url) is None:
            raise ValueError("`speller_url` must be a non-empty string.")

    def to_check_settings(self) -> CheckSettings:
        """Return the immutable settings value shared by every task of a run."""

        self.validate()
        return CheckSettings(
            format=self.format,
            languages=tuple(self.languages),
            options=dict(self.options),
            max_requests=self.max_requests,
            ignore_tags=tuple(self.ignore_tags),
            check_yo=self.check_yo,
        )


class ConfigLoader:
    """Factory methods for creating `TypoguardConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "format",
            "lang",
            "options",
            "max_requests",
            "ignore_tags",
            "check_yo",
            "file_extensions",
            "yo_dictionary",
            "speller_url",
            "timeout_seconds",
            "dictionary_report",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> TypoguardConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = yaml.safe_load(path_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> TypoguardConfig:
        """Create a validated config from `TYPOGUARD_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        text_format = ConfigLoader._optional_env_string(env_map, "TYPOGUARD_FORMAT") or "auto"
        languages = (
            parse_csv_tokens(ConfigLoader._optional_env_string(env_map, "TYPOGUARD_LANG"))
            or DEFAULT_LANGUAGES
        )
        max_requests = (
            ConfigLoader._optional_env_positive_int(env_map, "TYPOGUARD_MAX_REQUESTS")
            or DEFAULT_MAX_REQUESTS
        )
        check_yo = ConfigLoader._optional_env_boolean(env_map, "TYPOGUARD_CHECK_YO") or False
        ignore_tags_value = ConfigLoader._optional_env_string(env_map, "TYPOGUARD_IGNORE_TAGS")
        ignore_tags = (
            parse_csv_tokens(ignore_tags_value)
            if ignore_tags_value is not None
            else DEFAULT_IGNORE_TAGS
        )
        extensions = parse_csv_tokens(
            ConfigLoader._optional_env_string(env_map, "TYPOGUARD_FILE_EXTENSIONS")
        )
        speller_url = (
            ConfigLoader._optional_env_string(env_map, "TYPOGUARD_SPELLER_URL")
            or DEFAULT_SPELLER_URL
        )

        config = TypoguardConfig(
            format=text_format,
            languages=languages,
            max_requests=max_requests,
            ignore_tags=ignore_tags,
            check_yo=check_yo,
            file_extensions=tuple(normalize_extension(item) for item in extensions)
            or DEFAULT_FILE_EXTENSIONS,
            speller_url=speller_url,
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> TypoguardConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            raise ValueError(f"{source_label} includes unsupported key(s): {', '.join(unknown)}.")

        text_format = normalize_optional_string(payload.get("format")) or "auto"
        languages = parse_csv_tokens(payload.get("lang")) or DEFAULT_LANGUAGES
        options = ConfigLoader._optional_flag_map(payload, "options", source_label)
        max_requests = ConfigLoader._optional_positive_int(
            payload, "max_requests", source_label, default=DEFAULT_MAX_REQUESTS
        )
        ignore_tags = (
            parse_csv_tokens(payload["ignore_tags"])
            if "ignore_tags" in payload
            else DEFAULT_IGNORE_TAGS
        )
        check_yo = ConfigLoader._optional_boolean(payload, "check_yo", source_label, default=False)
        extensions = tuple(
            normalize_extension(item) for item in parse_csv_tokens(payload.get("file_extensions"))
        )
        yo_dictionary = normalize_optional_string(payload.get("yo_dictionary"))
        speller_url = normalize_optional_string(payload.get("speller_url")) or DEFAULT_SPELLER_URL
        timeout_seconds = ConfigLoader._optional_positive_float(
            payload, "timeout_seconds", source_label, default=DEFAULT_TIMEOUT_SECONDS
        )
        dictionary_report = normalize_optional_string(payload.get("dictionary_report"))

        config = TypoguardConfig(
            format=text_format,
            languages=languages,
            options=options,
            max_requests=max_requests,
            ignore_tags=ignore_tags,
            check_yo=check_yo,
            file_extensions=extensions or DEFAULT_FILE_EXTENSIONS,
            yo_dictionary=Path(yo_dictionary) if yo_dictionary is not None else None,
            speller_url=speller_url,
            timeout_seconds=timeout_seconds,
            dictionary_report=Path(dictionary_report) if dictionary_report is not None else None,
        )
        config.validate()
        return config

    @staticmethod
    def _optional_positive_int(
        payload: Mapping[str, Any], key: str, source_label: str, default: int
    ) -> int:
        """Read and validate a positive integer payload field."""

        if key not in payload:
            return default

        raw_value = payload[key]
        if isinstance(raw_value, bool):
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        if isinstance(raw_value, int):
            parsed = raw_value
        else:
            normalized = normalize_optional_string(raw_value)
            if normalized is None:
                return default
            try:
                parsed = int(normalized)
            except ValueError as exc:
                raise ValueError(
                    f"{source_label} field `{key}` must be a positive integer."
                ) from exc

        if parsed <= 0:
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_positive_float(
        payload: Mapping[str, Any], key: str, source_label: str, default: float
    ) -> float:
        """Read and validate a positive number payload field."""

        if key not in payload:
            return default
        raw_value = payload[key]
        if isinstance(raw_value, bool):
            raise ValueError(f"{source_label} field `{key}` must be a positive number.")
        try:
            parsed = float(raw_value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{source_label} field `{key}` must be a positive number.") from exc
        if parsed <= 0:
            raise ValueError(f"{source_label} field `{key}` must be a positive number.")
        return parsed

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_flag_map(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> dict[str, bool]:
        """Read an optional mapping of option names to boolean flags."""

        raw = payload.get(key)
        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")

        flags: dict[str, bool] = {}
        for raw_name, raw_value in raw.items():
            name = normalize_optional_string(raw_name)
            if name is None:
                raise ValueError(f"{source_label} field `{key}` contains a blank key.")
            parsed = parse_permissive_boolean(raw_value)
            if parsed is None:
                raise ValueError(
                    f"{source_label} field `{key}.{name}` must be a boolean value."
                )
            flags[name] = parsed
        return flags

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_positive_int(env: Mapping[str, str], key: str) -> int | None:
        """Read an optional positive integer from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        try:
            parsed = int(raw_value)
        except ValueError as exc:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.") from exc
        if parsed <= 0:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if key not in env:
            return None
        parsed = parse_permissive_boolean(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
