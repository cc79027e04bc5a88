from __future__ import annotations

import pytest

from triviacapture.trivia.errors import SegmentationFailure
from triviacapture.trivia.segment import find_dominant_column, partition_region, segment_question
from triviacapture.ocr.schema import TextLine


def make_line(text: str, x1: int, y1: int, conf: float = 90.0, width: int = 300) -> TextLine:
    return TextLine(text=text, conf=conf, bbox=(x1, y1, x1 + width, y1 + 30))


def _at(xs):
    return [make_line(f"l{i}", x, 100 + 40 * i) for i, x in enumerate(xs)]


def test_cluster_skips_far_right_edges() -> None:
    rep, streak = find_dominant_column(_at([10, 12, 15, 300, 11, 14]))

    assert rep == 15
    assert streak == 4


def test_cluster_ties_keep_earliest_run() -> None:
    rep, streak = find_dominant_column(_at([10, 20, 150, 160]))

    assert rep == 20
    assert streak == 1


def test_cluster_gap_resets_streak() -> None:
    rep, streak = find_dominant_column(_at([10, 100, 110, 120, 130]))

    assert rep == 130
    assert streak == 3


def test_cluster_without_eligible_edges() -> None:
    assert find_dominant_column([]) == (None, 0)
    assert find_dominant_column(_at([250, 400])) == (None, 0)


def test_partition_splits_question_and_options() -> None:
    lines = [
        make_line("12:04  LIVE", 600, 20),
        make_line("Which of these animals", 40, 100),
        make_line("is a marsupial?", 42, 140),
        make_line("Koala", 45, 300),
        make_line("Panda", 44, 360),
        make_line("Sloth", 43, 420),
    ]

    q = segment_question(lines)

    assert q.text == "Which of these animals is a marsupial?"
    assert q.options == ["Koala", "Panda", "Sloth"]
    assert q.scores == []


def test_partition_recovers_lines_off_the_column_inside_the_band() -> None:
    lines = [
        make_line("In which year did", 40, 100),
        make_line("the Berlin Wall fall?", 320, 140),
        make_line("1987", 40, 300),
        make_line("1989", 40, 360),
        make_line("1991", 40, 420),
    ]

    q = partition_region(lines, 40)

    assert q.text == "In which year did the Berlin Wall fall?"
    assert q.options == ["1987", "1989", "1991"]


def test_options_are_always_the_last_three_lines() -> None:
    lines = [make_line(f"line {i}", 40, 100 + 50 * i) for i in range(7)]

    q = partition_region(lines, 40)

    assert q.options == ["line 4", "line 5", "line 6"]
    assert q.text == "line 0 line 1 line 2 line 3"


def test_too_few_lines_is_a_segmentation_failure() -> None:
    lines = [make_line("Q?", 40, 100), make_line("A", 40, 200), make_line("B", 40, 300)]

    with pytest.raises(SegmentationFailure) as exc:
        partition_region(lines, 40)

    assert exc.value.survived == 3
    assert exc.value.required == 4


def test_no_column_is_a_segmentation_failure() -> None:
    with pytest.raises(SegmentationFailure):
        segment_question([make_line("far right", 900, 100) for _ in range(5)])
