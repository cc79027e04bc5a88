"""Answer multiple-choice trivia questions from screenshots."""

__version__ = "0.3.0"
