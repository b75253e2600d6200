"""Unit tests for the letter-Yo dictionary and linter backend."""

from __future__ import annotations

from pathlib import Path

import pytest

from typoguard.backends.yo_linter import YoDictionary, YoLinterBackend
from typoguard.models.datatypes import TYPO_CODE_LETTER_YO, CheckSettings


def test_bundled_dictionary_loads_yo_words() -> None:
    """The packaged word list should load and resolve common words."""

    dictionary = YoDictionary.bundled()

    assert len(dictionary) > 300
    assert dictionary.lookup("еще") == "ещё"
    assert dictionary.lookup("Елка") == "Ёлка"
    assert dictionary.lookup("ЕЩЕ") == "ЕЩЁ"
    assert dictionary.lookup("ежик") == "ёжик"
    assert dictionary.lookup("Пришел") == "Пришёл"
    assert dictionary.lookup("стол") is None


def test_dictionary_from_file_skips_comments_and_words_without_yo(tmp_path: Path) -> None:
    """Custom dictionaries ignore comments, blanks, and words without `ё`."""

    path = tmp_path / "yo.txt"
    path.write_text("# comment\n\nёж\nстол\n  Пёс  \n", encoding="utf-8")

    dictionary = YoDictionary.from_file(path)

    assert len(dictionary) == 2
    assert dictionary.lookup("еж") == "ёж"
    assert dictionary.lookup("Пес") == "Пёс"


def test_lint_reports_words_in_first_seen_order_with_counts() -> None:
    """Each written form is one record; repeats raise its count."""

    linter = YoLinterBackend(YoDictionary(["ещё", "ёлка"]))

    typos = linter.lint("Еще одна елка, еще одна елка и ещё раз Еще.")

    assert [(typo.word, typo.suggestions, typo.count) for typo in typos] == [
        ("Еще", ("Ещё",), 2),
        ("елка", ("ёлка",), 2),
        ("еще", ("ещё",), 1),
    ]
    assert {typo.code for typo in typos} == {TYPO_CODE_LETTER_YO}


@pytest.mark.asyncio
async def test_backend_declines_unless_check_yo_is_enabled() -> None:
    """The linter returns an empty outcome when `check_yo` is off."""

    backend = YoLinterBackend(YoDictionary(["ещё"]))

    disabled = await backend.check("еще", CheckSettings(check_yo=False))
    enabled = await backend.check("еще", CheckSettings(check_yo=True))
    clean = await backend.check("стол", CheckSettings(check_yo=True))

    assert disabled.failed is False and disabled.typos is None
    assert [typo.word for typo in enabled.typos] == ["еще"]
    assert clean.typos is None
