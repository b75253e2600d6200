"""Typo-checking backends for typoguard.

This package contains the backend contract and registry, the remote speller
backend with its HTTP client, and the letter-Yo linter.
"""

from .base import BackendRegistry, CheckBackend
from .speller_client import SpellerServiceError, YandexSpellerClient
from .yandex_speller import YandexSpellerBackend
from .yo_linter import YoDictionary, YoLinterBackend

__all__ = [
    "BackendRegistry",
    "CheckBackend",
    "SpellerServiceError",
    "YandexSpellerBackend",
    "YandexSpellerClient",
    "YoDictionary",
    "YoLinterBackend",
]
