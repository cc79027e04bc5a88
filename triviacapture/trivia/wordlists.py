from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .errors import ConfigurationFormatError

FILTERED_SECTION = "filtered words"
NEGATIVE_SECTION = "negative words"

_here = os.path.dirname(__file__)
DEFAULT_WORDLIST_PATH = os.path.join(_here, "wordlists.txt")


@dataclass(frozen=True)
class WordLists:
    """Stop words and negation markers, loaded once and only read afterwards."""

    filtered: Tuple[str, ...] = ()
    negative: Tuple[str, ...] = ()


def parse_wordlists(text: str, path: str = "<string>") -> WordLists:
    """
    Parse the bracket-headed word-list format:

        [filtered words]
        the
        ?
        [negative words]
        not

    Entries are lowercased. Blank lines are ignored. An entry before the
    first header, or a header we do not know, is a ConfigurationFormatError.
    """
    sections: Dict[str, List[str]] = {FILTERED_SECTION: [], NEGATIVE_SECTION: []}
    current: Optional[str] = None

    for lineno, raw in enumerate(text.splitlines(), start=1):
        s = raw.strip()
        if not s:
            continue
        if s.startswith("[") and s.endswith("]"):
            name = " ".join(s[1:-1].lower().split())
            if name not in sections:
                raise ConfigurationFormatError(path, lineno, f"unknown section [{name}]")
            current = name
            continue
        if current is None:
            raise ConfigurationFormatError(path, lineno, f"entry {s!r} appears before any section header")
        entry = s.lower()
        if entry not in sections[current]:
            sections[current].append(entry)

    return WordLists(
        filtered=tuple(sections[FILTERED_SECTION]),
        negative=tuple(sections[NEGATIVE_SECTION]),
    )


def load_wordlists(path: Optional[str] = None) -> WordLists:
    p = path or DEFAULT_WORDLIST_PATH
    try:
        with open(p, "r", encoding="utf-8") as f:
            return parse_wordlists(f.read(), path=p)
    except OSError as e:
        raise ConfigurationFormatError(p, 0, f"cannot read word lists: {e}") from e
