from __future__ import annotations


class TriviaError(RuntimeError):
    """Base class for pipeline errors."""


class SegmentationFailure(TriviaError):
    """Too few aligned lines to split into a question and its options.

    Recoverable: the caller abstains for this image and may retry with a new capture.
    """

    def __init__(self, survived: int, required: int) -> None:
        super().__init__(f"only {survived} aligned line(s) survived, need at least {required}")
        self.survived = survived
        self.required = required


class ConfigurationFormatError(TriviaError):
    """The word-list file is malformed."""

    def __init__(self, path: str, lineno: int, reason: str) -> None:
        super().__init__(f"{path}:{lineno}: {reason}")
        self.path = path
        self.lineno = lineno
        self.reason = reason


class QuerySoftFailure(TriviaError):
    """A single search query failed; it scores zero and siblings continue."""


class ResponseParseError(QuerySoftFailure):
    """A search response body could not be parsed into result items."""


class BotDetectionError(TriviaError):
    """The search provider flagged our traffic as automated. Never retried."""

    def __init__(self, term: str) -> None:
        super().__init__(f"search provider reported automated traffic (query: {term!r})")
        self.term = term
