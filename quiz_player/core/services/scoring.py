"""Per-question evaluation and total score."""

from __future__ import annotations

from collections.abc import Iterable

from quiz_player.core.models import Question, QuestionEvaluation


def evaluate_question(question: Question, selected_ids: Iterable[str]) -> QuestionEvaluation:
    """Compare the selection against the correct answers of ``question``.

    A question counts only when the selected answers are exactly the correct
    ones. Ids that do not belong to the question never match and are dropped.
    """
    chosen = frozenset(selected_ids)
    selected_answers = tuple(answer for answer in question.answers if answer.id in chosen)
    correct_answers = question.correct_answers()

    all_selected_are_correct = all(answer.correct for answer in selected_answers)
    all_correct_are_selected = all(answer.id in chosen for answer in correct_answers)

    return QuestionEvaluation(
        question=question,
        selected_answers=selected_answers,
        correct_answers=correct_answers,
        is_correct=all_selected_are_correct and all_correct_are_selected,
    )


def total_score(evaluations: Iterable[QuestionEvaluation]) -> int:
    return sum(1 for evaluation in evaluations if evaluation.is_correct)
