"""Domain exceptions for resource checks and CLI diagnostics."""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """Raised when a specific command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped pipeline error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class ResourceError(RuntimeError):
    """Raised when one resource cannot be read, fetched, or parsed.

    `kind` is one of `input`, `transport`, or `format`.
    """

    def __init__(self, *, resource: str, detail: str, kind: str = "input") -> None:
        """Initialize a resource-scoped error."""

        super().__init__(f"{resource}: {detail}")
        self.resource = resource
        self.detail = detail
        self.kind = kind
