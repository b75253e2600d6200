"""Shared typed data models for typoguard.

This package contains dataclasses used across pipeline modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import (
    BackendDescriptor,
    BackendOutcome,
    CheckSettings,
    CrawlResult,
    ResourceFailure,
    ResourceReport,
    TypoRecord,
)

__all__ = [
    "BackendDescriptor",
    "BackendOutcome",
    "CheckSettings",
    "CrawlResult",
    "ResourceFailure",
    "ResourceReport",
    "TypoRecord",
]
