from __future__ import annotations

import pytest

from quiz_player.core.models import Answer, Question
from quiz_player.core.services.scoring import evaluate_question, total_score

QUESTION = Question(
    id="q1",
    text="Pick the primes",
    answers=(
        Answer("a", "2", True),
        Answer("b", "4", False),
        Answer("c", "7", True),
        Answer("d", "9", False),
    ),
)


@pytest.mark.parametrize(
    "selected, expected",
    [
        ({"a", "c"}, True),  # exactly the correct set
        ({"a"}, False),  # strict subset
        ({"a", "b", "c"}, False),  # strict superset
        ({"b", "d"}, False),  # disjoint
        (set(), False),  # nothing selected
    ],
)
def test_selection_must_equal_the_correct_set(selected, expected):
    assert evaluate_question(QUESTION, selected).is_correct is expected


def test_evaluation_lists_answers_in_question_order():
    evaluation = evaluate_question(QUESTION, ["c", "b"])

    assert [a.id for a in evaluation.selected_answers] == ["b", "c"]
    assert [a.id for a in evaluation.correct_answers] == ["a", "c"]
    assert evaluation.question is QUESTION


def test_unknown_ids_never_match():
    evaluation = evaluate_question(QUESTION, ["a", "c", "x"])

    assert evaluation.is_correct
    assert [a.id for a in evaluation.selected_answers] == ["a", "c"]


def test_total_score_counts_correct_evaluations():
    evaluations = [
        evaluate_question(QUESTION, {"a", "c"}),
        evaluate_question(QUESTION, {"a"}),
        evaluate_question(QUESTION, {"c", "a"}),
    ]

    assert total_score(evaluations) == 2
    assert total_score([]) == 0
