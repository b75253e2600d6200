"""Letter-Yo (`ё`) linter backend for Russian text.

Responsibilities:
- Find words written with `е` where only the `ё` spelling is correct.
- Report each distinct written form once with its occurrence count.
"""

from __future__ import annotations

from collections.abc import Iterable
from importlib import resources
from pathlib import Path
import re

from ..models.datatypes import (
    TYPO_CODE_LETTER_YO,
    BackendDescriptor,
    BackendOutcome,
    CheckSettings,
    TypoRecord,
)

_WORD_PATTERN = re.compile(r"[А-Яа-яЁё]+(?:-[А-Яа-яЁё]+)*")
_BUNDLED_DICTIONARY = "yo_safe.txt"


def _restore_case(template: str, replacement: str) -> str:
    """Apply the letter case of `template` to an equally long `replacement`."""

    return "".join(
        new.upper() if old.isupper() else new
        for old, new in zip(template, replacement)
    )


class YoDictionary:
    """Lookup table from `е`-spelled words to their mandatory `ё` spelling."""

    def __init__(self, words: Iterable[str]) -> None:
        """Build the table from words containing `ё`; other entries are ignored."""

        self._replacements: dict[str, str] = {}
        for raw in words:
            word = raw.strip().lower()
            if not word or word.startswith("#") or "ё" not in word:
                continue
            self._replacements[word.replace("ё", "е")] = word

    def __len__(self) -> int:
        return len(self._replacements)

    @classmethod
    def from_file(cls, path: Path) -> YoDictionary:
        """Load a UTF-8 dictionary with one word per line."""

        return cls(path.read_text(encoding="utf-8").splitlines())

    @classmethod
    def bundled(cls) -> YoDictionary:
        """Load the dictionary shipped with the package."""

        source = resources.files(__package__).joinpath("data").joinpath(_BUNDLED_DICTIONARY)
        return cls(source.read_text(encoding="utf-8").splitlines())

    def lookup(self, word: str) -> str | None:
        """Return the Yo spelling for `word`, keeping its letter case."""

        replacement = self._replacements.get(word.lower())
        if replacement is None:
            return None
        return _restore_case(word, replacement)


class YoLinterBackend:
    """Report words that must be written with `ё`."""

    descriptor = BackendDescriptor(
        name="yo",
        description="Letter Ё (Yo)",
        languages=("ru",),
        formats=("plain", "html", "markdown"),
    )

    def __init__(self, dictionary: YoDictionary | None = None) -> None:
        """Initialize the linter with a Yo dictionary (bundled by default)."""

        self._dictionary = dictionary if dictionary is not None else YoDictionary.bundled()

    async def check(self, text: str, settings: CheckSettings) -> BackendOutcome:
        """Lint text when `check_yo` is enabled; otherwise decline with no typos."""

        if not settings.check_yo:
            return BackendOutcome.ok()
        typos = self.lint(text)
        return BackendOutcome.ok(typos or None)

    def lint(self, text: str) -> list[TypoRecord]:
        """Return Yo records in first-seen order with occurrence counts."""

        found: dict[str, list] = {}
        for match in _WORD_PATTERN.finditer(text):
            word = match.group(0)
            if "е" not in word and "Е" not in word:
                continue
            if word in found:
                found[word][1] += 1
                continue
            replacement = self._dictionary.lookup(word)
            if replacement is not None:
                found[word] = [replacement, 1]

        return [
            TypoRecord(
                code=TYPO_CODE_LETTER_YO,
                word=word,
                suggestions=(replacement,),
                count=count,
            )
            for word, (replacement, count) in found.items()
        ]
