from __future__ import annotations

from triviacapture.trivia.methods import ScoringMethod, count_mentions
from triviacapture.trivia.models import Question, ResultItem, ScoreEntry, SearchDocument, SearchOutcome
from triviacapture.trivia.scoring import best_index, combine_scores, raw_scores, score_question

M1 = ScoringMethod.QUESTION
M2 = ScoringMethod.QUESTION_AND_OPTION


def _entries(method, scores):
    return [ScoreEntry(option=f"opt{i}", option_index=i, raw_score=s, method=method) for i, s in enumerate(scores)]


def _outcome(option: str, idx: int, method, *texts: str) -> SearchOutcome:
    doc = SearchDocument(items=[ResultItem(title=t, snippet="") for t in texts])
    return SearchOutcome(payload=doc, target_option=option, option_index=idx, method=method)


def test_each_method_is_rescaled_to_100() -> None:
    entries = _entries(M1, [3, 7]) + _entries(M2, [0, 0])

    totals = combine_scores(entries, 2)

    assert totals == [30.0, 70.0]
    assert best_index(totals) == 1


def test_methods_contribute_equally_regardless_of_hit_volume() -> None:
    entries = _entries(M1, [1, 3]) + _entries(M2, [300, 100])

    totals = combine_scores(entries, 2)

    assert totals == [100.0, 100.0]


def test_negation_flips_signs_and_keeps_magnitudes() -> None:
    entries = _entries(M1, [3, 7]) + _entries(M2, [0, 0])

    totals = combine_scores(entries, 2, negative=True)

    assert totals == [-30.0, -70.0]
    assert best_index(totals) == 0


def test_ties_go_to_the_first_option() -> None:
    assert best_index([5.0, 5.0, 1.0]) == 0
    assert best_index([0.0, 0.0, 0.0]) == 0
    assert best_index([1.0, 4.0, 4.0]) == 1


def test_count_mentions_is_case_insensitive_and_ignores_empty_needles() -> None:
    assert count_mentions("paris is in france. PARIS!", "Paris") == 2
    assert count_mentions("anything", "  ") == 0


def test_raw_score_uses_the_better_of_plain_and_filtered_option() -> None:
    outcomes = [
        _outcome("The Beatles", 0, M1, "Beatles tour", "the beatles", "Beatles records"),
        _outcome("Queen", 1, M1, "queen"),
    ]

    entries = raw_scores(outcomes, ["the"])

    assert [e.raw_score for e in entries] == [3.0, 1.0]


def test_failed_outcome_scores_zero() -> None:
    outcomes = [SearchOutcome(payload=None, target_option="Mars", option_index=0, method=M1)]

    entries = raw_scores(outcomes, [])

    assert entries[0].raw_score == 0.0


def test_score_question_fills_scores_in_option_order() -> None:
    q = Question(text="Which is the Red Planet?", options=["Venus", "Mars", "Pluto"])
    outcomes = [
        _outcome("Mars", 1, M1, "Mars is red", "mars rover"),
        _outcome("Venus", 0, M1, "Venus is hot"),
        _outcome("Pluto", 2, M1, "nothing here"),
        _outcome("Mars", 1, M2, "Mars"),
        _outcome("Venus", 0, M2, ""),
        _outcome("Pluto", 2, M2, ""),
    ]

    best = score_question(q, outcomes, [])

    assert best == 1
    assert len(q.scores) == 3
    assert round(q.scores[0], 6) == round(100.0 / 3, 6)
    assert round(q.scores[1], 6) == round(200.0 / 3 + 100.0, 6)
    assert q.scores[2] == 0.0
