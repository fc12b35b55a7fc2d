from __future__ import annotations

import pytest

from conftest import make_question
from quiz_player.core.errors import (
    DuplicateIdentifierError,
    EmptyQuizError,
    InvalidAnswerCountError,
    MalformedQuizError,
    MissingCorrectAnswerError,
    WrongCorrectAnswerCountError,
)
from quiz_player.core.models import Answer, Question, Quiz
from quiz_player.core.quiz_schema import QuizPayload
from quiz_player.core.quiz_validation import build_quiz
from quiz_player.core.rules import CorrectnessPolicy


def test_build_quiz_converts_payload_to_models(two_question_payload):
    quiz = build_quiz(two_question_payload)

    assert quiz.title == "Two questions"
    assert [q.id for q in quiz.questions] == ["q1", "q2"]
    assert quiz.questions[0].answers[0] == Answer(id="a", text="Alpha", correct=True)


@pytest.mark.parametrize(
    "payload",
    [None, {}, {"questions": []}, {"questions": None}, {"questions": "q1"}],
)
def test_missing_or_empty_questions_is_empty_quiz(payload):
    with pytest.raises(EmptyQuizError):
        build_quiz(payload)


@pytest.mark.parametrize("answer_count", [0, 1, 5])
def test_answer_count_outside_two_to_four_is_rejected(answer_count):
    payload = {"questions": [make_question("q1", [True] + [False] * (answer_count - 1))]}
    if answer_count == 0:
        payload["questions"][0]["answers"] = []

    with pytest.raises(InvalidAnswerCountError) as excinfo:
        build_quiz(payload)

    assert excinfo.value.position == 1
    assert excinfo.value.count == answer_count
    assert f"has {answer_count} answers" in str(excinfo.value)


def test_missing_answers_field_counts_as_zero_answers():
    payload = {"questions": [{"id": "q1", "text": "No answers here"}]}

    with pytest.raises(InvalidAnswerCountError) as excinfo:
        build_quiz(payload)

    assert excinfo.value.count == 0


def test_error_names_the_one_based_position_of_the_bad_question():
    payload = {
        "questions": [
            make_question("q1", [True, False]),
            make_question("q2", [True, False]),
            make_question("q3", [False, False, False]),
        ]
    }

    with pytest.raises(MissingCorrectAnswerError) as excinfo:
        build_quiz(payload)

    assert excinfo.value.position == 3
    assert excinfo.value.count == 0
    assert "Question #3" in str(excinfo.value)


def test_answer_count_is_checked_before_correctness_for_the_same_question():
    payload = {"questions": [make_question("q1", [False])]}

    with pytest.raises(InvalidAnswerCountError):
        build_quiz(payload)


def test_multiple_correct_answers_pass_the_default_policy():
    quiz = build_quiz({"questions": [make_question("q1", [True, True, False])]})

    assert len(quiz.questions[0].correct_answers()) == 2


def test_exactly_one_policy_rejects_multiple_correct_answers():
    payload = {"questions": [make_question("q1", [True, True, False])]}

    with pytest.raises(WrongCorrectAnswerCountError) as excinfo:
        build_quiz(payload, CorrectnessPolicy.EXACTLY_ONE)

    assert excinfo.value.count == 2


def test_exactly_one_policy_rejects_no_correct_answer():
    payload = {"questions": [make_question("q1", [False, False])]}

    with pytest.raises(WrongCorrectAnswerCountError) as excinfo:
        build_quiz(payload, CorrectnessPolicy.EXACTLY_ONE)

    assert excinfo.value.count == 0


def test_duplicate_question_ids_are_rejected():
    payload = {"questions": [make_question("q1", [True, False]), make_question("q1", [True, False])]}

    with pytest.raises(DuplicateIdentifierError):
        build_quiz(payload)


def test_duplicate_answer_ids_within_a_question_are_rejected():
    question = make_question("q1", [True, False])
    question["answers"][1]["id"] = "a"

    with pytest.raises(DuplicateIdentifierError):
        build_quiz({"questions": [question]})


def test_answer_ids_may_repeat_across_questions(two_question_payload):
    two_question_payload["questions"][1]["answers"][0]["id"] = "a"

    quiz = build_quiz(two_question_payload)

    assert quiz.questions[1].answers[0].id == "a"


def test_wrong_field_types_are_malformed():
    question = make_question("q1", [True, False])
    question["answers"][0]["correct"] = {"nested": True}

    with pytest.raises(MalformedQuizError):
        build_quiz({"questions": [question]})


def test_malformed_message_names_the_field_but_not_its_value():
    question = make_question("q1", [True, False])
    question["text"] = {"api_key": "TOPSECRET"}

    with pytest.raises(MalformedQuizError) as excinfo:
        build_quiz({"questions": [question]})

    assert "questions.0.text" in str(excinfo.value)
    assert "TOPSECRET" not in str(excinfo.value)


def test_non_mapping_payload_is_malformed():
    with pytest.raises(MalformedQuizError):
        build_quiz(["not", "a", "quiz"])


def test_text_is_stripped_and_blank_title_dropped():
    payload = {"title": "   ", "questions": [make_question("q1", [True, False])]}
    payload["questions"][0]["text"] = "  Padded  "

    quiz = build_quiz(payload)

    assert quiz.title is None
    assert quiz.questions[0].text == "Padded"


def test_prebuilt_models_are_validated_too():
    quiz = Quiz(
        questions=(Question(id="q1", text="Only one answer", answers=(Answer("a", "A", True),)),)
    )

    with pytest.raises(InvalidAnswerCountError):
        build_quiz(quiz)


def test_payload_schema_instances_are_accepted(two_question_payload):
    payload = QuizPayload.model_validate(two_question_payload)

    assert len(build_quiz(payload).questions) == 2
