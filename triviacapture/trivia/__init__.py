from .errors import (
    BotDetectionError,
    ConfigurationFormatError,
    QuerySoftFailure,
    ResponseParseError,
    SegmentationFailure,
    TriviaError,
)
from .methods import ScoringMethod
from .models import NUM_OPTIONS, Answer, Question, SearchOutcome, SearchQuery
from .pipeline import answer_question, recognize_question, solve_image
from .wordlists import WordLists, load_wordlists

__all__ = [
    "Answer",
    "BotDetectionError",
    "ConfigurationFormatError",
    "NUM_OPTIONS",
    "Question",
    "QuerySoftFailure",
    "ResponseParseError",
    "ScoringMethod",
    "SearchOutcome",
    "SearchQuery",
    "SegmentationFailure",
    "TriviaError",
    "WordLists",
    "answer_question",
    "load_wordlists",
    "recognize_question",
    "solve_image",
]
