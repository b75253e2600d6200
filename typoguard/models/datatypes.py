"""Core datatypes shared across typoguard modules.

Responsibilities:
- Represent immutable records exchanged between pipeline stages.
- Provide explicit typing for check settings, backend outcomes, and reports.

Key types:
- `CheckSettings`, `TypoRecord`, `BackendOutcome`, `BackendDescriptor`,
  `ResourceReport`, and `ResourceFailure`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

TYPO_CODE_UNKNOWN_WORD = 1
TYPO_CODE_REPEAT_WORD = 2
TYPO_CODE_CAPITALIZATION = 3
TYPO_CODE_TOO_MANY_ERRORS = 4
TYPO_CODE_LETTER_YO = 100

TYPO_CODE_TITLES: Mapping[int, str] = MappingProxyType(
    {
        TYPO_CODE_UNKNOWN_WORD: "Typos",
        TYPO_CODE_REPEAT_WORD: "Repeat words",
        TYPO_CODE_CAPITALIZATION: "Capitalization",
        TYPO_CODE_TOO_MANY_ERRORS: "Too many errors",
        TYPO_CODE_LETTER_YO: "Letter Ё (Yo)",
    }
)

SUPPORTED_FORMATS = frozenset({"plain", "html", "markdown"})


def _frozen_mapping(values: Mapping[str, object] | None) -> Mapping[str, object]:
    """Return a read-only copy of an option mapping."""

    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True, slots=True)
class CheckSettings:
    """Immutable settings shared by every task of one check run.

    Attributes:
        format: Text format (`plain`, `html`, `markdown`, or `auto` before resolution).
        languages: Ordered language codes passed to backends.
        options: Read-only backend-specific options.
        max_requests: Concurrency ceiling for every dispatch level.
        ignore_tags: Markup tag names whose content is excluded from checks.
        check_yo: Whether the letter-Yo linter should run.
    """

    format: str = "plain"
    languages: tuple[str, ...] = ("en", "ru")
    options: Mapping[str, object] = field(default_factory=lambda: _frozen_mapping(None))
    max_requests: int = 2
    ignore_tags: tuple[str, ...] = ()
    check_yo: bool = False

    def __post_init__(self) -> None:
        """Freeze option mapping and validate the concurrency ceiling."""

        if not isinstance(self.options, MappingProxyType):
            object.__setattr__(self, "options", _frozen_mapping(self.options))
        if self.max_requests < 1:
            raise ValueError("`max_requests` must be a positive integer.")


@dataclass(frozen=True, slots=True)
class TypoRecord:
    """One reported spelling or typography issue.

    Attributes:
        code: Typo category code.
        word: Offending token, or `None` for whole-text diagnostics.
        suggestions: Ordered replacement suggestions.
        count: Number of occurrences represented by this record.
    """

    code: int
    word: str | None
    suggestions: tuple[str, ...] = ()
    count: int = 1

    def as_payload(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "code": self.code,
            "word": self.word,
            "suggestions": list(self.suggestions),
            "count": self.count,
        }


@dataclass(frozen=True, slots=True)
class BackendOutcome:
    """Result of one backend (or chunk) check.

    `failed=True` means the call itself errored; clean text is `failed=False`
    with empty or `None` typos.
    """

    failed: bool
    typos: tuple[TypoRecord, ...] | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.failed and self.typos is not None:
            raise ValueError("A failed outcome cannot carry typos.")

    @classmethod
    def ok(cls, typos: tuple[TypoRecord, ...] | list[TypoRecord] | None = None) -> BackendOutcome:
        """Build a successful outcome."""

        return cls(failed=False, typos=tuple(typos) if typos is not None else None)

    @classmethod
    def failure(cls, error: str) -> BackendOutcome:
        """Build a failed outcome with a description."""

        return cls(failed=True, typos=None, error=error)


@dataclass(frozen=True, slots=True)
class BackendDescriptor:
    """Static description of a checking backend."""

    name: str
    description: str
    languages: tuple[str, ...]
    formats: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ResourceReport:
    """Successful check of one file, URL, or literal text.

    Attributes:
        resource: File path, URL, or text label.
        typos: Merged typo records in backend submission order.
        elapsed_millis: Wall time of the text check.
    """

    resource: str
    typos: tuple[TypoRecord, ...]
    elapsed_millis: int

    @property
    def failed(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class ResourceFailure:
    """Failure value for a resource that could not be read, fetched, or checked.

    Attributes:
        resource: File path or URL.
        message: Human-readable reason naming the resource.
        kind: Failure class (`input`, `transport`, `format`, or `backend`).
    """

    resource: str
    message: str
    kind: str = "input"

    @property
    def failed(self) -> bool:
        return True


CrawlResult = Union[ResourceReport, ResourceFailure]
