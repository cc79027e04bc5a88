from __future__ import annotations

import pytest

from triviacapture.trivia.errors import ConfigurationFormatError
from triviacapture.trivia.selftest import run_wordlist_selftest
from triviacapture.trivia.wordlists import load_wordlists, parse_wordlists


def test_parses_both_sections() -> None:
    text = "[filtered words]\nThe\n\n?\n[negative words]\nNOT\nnever\n"

    words = parse_wordlists(text)

    assert words.filtered == ("the", "?")
    assert words.negative == ("not", "never")


def test_sections_can_repeat_and_entries_dedupe() -> None:
    text = "[negative words]\nnot\n[filtered words]\nof\n[negative words]\nnot\nleast\n"

    words = parse_wordlists(text)

    assert words.filtered == ("of",)
    assert words.negative == ("not", "least")


def test_entry_before_header_is_rejected() -> None:
    with pytest.raises(ConfigurationFormatError) as exc:
        parse_wordlists("the\n[filtered words]\nof\n", path="words.txt")

    assert exc.value.lineno == 1
    assert "words.txt:1" in str(exc.value)


def test_unknown_section_is_rejected() -> None:
    with pytest.raises(ConfigurationFormatError):
        parse_wordlists("[filtered words]\nthe\n[stop words]\nof\n")


def test_missing_file_is_a_configuration_error(tmp_path) -> None:
    with pytest.raises(ConfigurationFormatError):
        load_wordlists(str(tmp_path / "missing.txt"))


def test_bundled_wordlists_load_and_pass_selftest() -> None:
    words = load_wordlists()

    assert "the" in words.filtered
    assert "?" in words.filtered
    assert "not" in words.negative
    run_wordlist_selftest(words)
