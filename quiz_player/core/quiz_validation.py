"""Turn raw quiz payloads into validated ``Quiz`` models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from quiz_player.constants.quiz_constants import (
    MAX_ANSWERS_PER_QUESTION,
    MIN_ANSWERS_PER_QUESTION,
)
from quiz_player.core.errors import (
    DuplicateIdentifierError,
    EmptyQuizError,
    InvalidAnswerCountError,
    MalformedQuizError,
    MissingCorrectAnswerError,
    WrongCorrectAnswerCountError,
)
from quiz_player.core.models import Question, Quiz
from quiz_player.core.quiz_schema import QuizPayload
from quiz_player.core.rules import CorrectnessPolicy

QuizData = Mapping[str, Any] | QuizPayload | Quiz | None


def build_quiz(
    payload: QuizData,
    policy: CorrectnessPolicy = CorrectnessPolicy.AT_LEAST_ONE,
) -> Quiz:
    """Parse ``payload`` and validate it against ``policy``.

    Raises a ``QuizValidationError`` subclass on the first violation found.
    """
    quiz = _parse_payload(payload)
    validate_quiz(quiz, policy)
    return quiz


def validate_quiz(quiz: Quiz, policy: CorrectnessPolicy) -> None:
    if not quiz.questions:
        raise EmptyQuizError()

    seen_question_ids: set[str] = set()
    for position, question in enumerate(quiz.questions, start=1):
        _validate_answer_count(position, question)
        _validate_correct_count(position, question, policy)
        _validate_answer_ids(position, question)
        if question.id in seen_question_ids:
            raise DuplicateIdentifierError(
                f"Question #{position} reuses the question id '{question.id}'."
            )
        seen_question_ids.add(question.id)


def _parse_payload(payload: QuizData) -> Quiz:
    if payload is None:
        raise EmptyQuizError()
    if isinstance(payload, Quiz):
        return payload
    if isinstance(payload, QuizPayload):
        return payload.to_model()
    if not isinstance(payload, Mapping):
        raise MalformedQuizError(
            f"Quiz payload must be an object, got {type(payload).__name__}."
        )

    questions = payload.get("questions")
    if not isinstance(questions, list) or not questions:
        raise EmptyQuizError()

    try:
        return QuizPayload.model_validate(payload).to_model()
    except ValidationError as exc:
        # Field locations and messages only, never the input values.
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise MalformedQuizError(f"Quiz payload is malformed: {details}") from exc


def _validate_answer_count(position: int, question: Question) -> None:
    count = len(question.answers)
    if not MIN_ANSWERS_PER_QUESTION <= count <= MAX_ANSWERS_PER_QUESTION:
        raise InvalidAnswerCountError(
            position, count, MIN_ANSWERS_PER_QUESTION, MAX_ANSWERS_PER_QUESTION
        )


def _validate_correct_count(position: int, question: Question, policy: CorrectnessPolicy) -> None:
    correct_count = len(question.correct_answers())
    if policy is CorrectnessPolicy.EXACTLY_ONE:
        if correct_count != 1:
            raise WrongCorrectAnswerCountError(position, correct_count)
    elif correct_count < 1:
        raise MissingCorrectAnswerError(position, correct_count)


def _validate_answer_ids(position: int, question: Question) -> None:
    ids = [answer.id for answer in question.answers]
    if len(set(ids)) != len(ids):
        raise DuplicateIdentifierError(
            f"Question #{position} has duplicate answer ids: {', '.join(ids)}."
        )
