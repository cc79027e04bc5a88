from __future__ import annotations

from triviacapture.trivia.negation import detect_negation

MARKERS = ["not", "never", "least"]


def test_detects_unquoted_marker_case_insensitively() -> None:
    assert detect_negation("Which of these is NOT a mammal?", MARKERS) is True


def test_quoted_marker_is_ignored() -> None:
    assert detect_negation('Which film is "Not Another Teen Movie" a parody of?', MARKERS) is False


def test_later_unquoted_occurrence_still_counts() -> None:
    assert detect_negation('"Not Fade Away" was not written by whom?', MARKERS) is True


def test_marker_needs_word_boundary_after_it() -> None:
    assert detect_negation("Which team plays in Nottingham?", MARKERS) is False


def test_any_configured_marker_sets_flag() -> None:
    assert detect_negation("Which planet is the least dense?", MARKERS) is True


def test_no_markers_configured() -> None:
    assert detect_negation("Which of these is not a mammal?", []) is False
