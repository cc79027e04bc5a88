from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .methods import ScoringMethod

NUM_OPTIONS = 3


@dataclass
class Question:
    text: str
    options: List[str]
    scores: List[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.options) != NUM_OPTIONS:
            raise ValueError(f"expected {NUM_OPTIONS} options, got {len(self.options)}")
        if self.scores and len(self.scores) != len(self.options):
            raise ValueError("scores must line up with options")

    def __str__(self) -> str:
        opts = ", ".join(f"'{o}'" for o in self.options)
        return f"question: '{self.text}'; options: [{opts}]"


@dataclass(frozen=True)
class SearchQuery:
    term: str
    target_option: str
    option_index: int
    method: "ScoringMethod"


@dataclass(frozen=True)
class ResultItem:
    title: str
    snippet: str


@dataclass(frozen=True)
class SearchDocument:
    items: List[ResultItem]

    def text(self) -> str:
        """Titles and snippets of every item, lowercased, as one haystack."""
        parts: List[str] = []
        for it in self.items:
            parts.append(it.title)
            parts.append(it.snippet)
        return "\n".join(parts).lower()


@dataclass(frozen=True)
class SearchOutcome:
    # None marks a soft failure (transport or parse error)
    payload: Optional[SearchDocument]
    target_option: str
    option_index: int
    method: "ScoringMethod"
    bot_detected: bool = False
    term: str = ""

    @property
    def ok(self) -> bool:
        return self.payload is not None


@dataclass(frozen=True)
class ScoreEntry:
    option: str
    option_index: int
    raw_score: float
    method: "ScoringMethod"


@dataclass
class Answer:
    question: Question
    best_index: int
    negative: bool = False

    @property
    def best_option(self) -> str:
        return self.question.options[self.best_index]
