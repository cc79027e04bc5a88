from __future__ import annotations

from typing import List, Sequence

QUOTE_CHARS = ('"', "“", "”")


def count_quotes(s: str) -> int:
    return sum(s.count(q) for q in QUOTE_CHARS)


def _apply_stop_word(token: str, word: str) -> str:
    if len(word) == 1 and not word.isalnum():
        return token.replace(word, "")
    if token.lower() == word:
        return ""
    return token


def filter_query(text: str, stop_words: Sequence[str]) -> str:
    """
    Build a search phrase by removing stop words and punctuation marks.

    Tokens are walked from last to first. A token with an odd number of quote
    characters opens or closes a quoted span; quoted tokens (including the
    ones carrying the quotes) are left untouched.
    """
    tokens = text.split()
    out: List[str] = []
    quoted = False
    for token in reversed(tokens):
        odd = count_quotes(token) % 2 == 1
        if odd:
            quoted = not quoted
        if not (quoted or odd):
            for word in stop_words:
                token = _apply_stop_word(token, word)
                if not token:
                    break
        if token:
            out.append(token)
    out.reverse()
    return " ".join(out)
