"""Telemetry and observability helpers.

This package emits deterministic run events for resource checks.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
