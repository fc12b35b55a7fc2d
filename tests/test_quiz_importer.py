from __future__ import annotations

import pytest

from quiz_player.core.errors import EmptyQuizError, QuizImportError
from quiz_player.core.quiz_importer import parse_quiz_text
from quiz_player.core.quiz_session import QuizSession
from quiz_player.core.quiz_validation import build_quiz

QUIZ_TEXT = """\
TITLE: Warm-up

Q: What is $2 + 2$?
A: 3
B: 4
CORRECT: B

---

ID: primes
Q: Which numbers are prime?
Choose all that apply.
A: 2
B: 4
C: 7
D: 9
CORRECT: A, C
"""


def test_parses_title_questions_and_correct_letters():
    payload = parse_quiz_text(QUIZ_TEXT)

    assert payload["title"] == "Warm-up"
    first, second = payload["questions"]
    assert first["id"] == "q1"
    assert first["text"] == "What is $2 + 2$?"
    assert first["answers"] == [
        {"id": "a", "text": "3", "correct": False},
        {"id": "b", "text": "4", "correct": True},
    ]
    assert second["id"] == "primes"
    assert second["text"] == "Which numbers are prime?\nChoose all that apply."
    assert [a["id"] for a in second["answers"] if a["correct"]] == ["a", "c"]


def test_parsed_payload_loads_as_a_quiz():
    quiz = build_quiz(parse_quiz_text(QUIZ_TEXT))

    assert quiz.title == "Warm-up"
    assert len(quiz.questions) == 2


def test_question_without_correct_marker_is_left_to_validation():
    payload = parse_quiz_text("Q: Unknown?\nA: yes\nB: no\n")

    assert all(not answer["correct"] for answer in payload["questions"][0]["answers"])


def test_option_continuation_lines_are_joined():
    payload = parse_quiz_text("Q: Pick\nA: first line\nstill first\nB: second\nCORRECT: A\n")

    assert payload["questions"][0]["answers"][0]["text"] == "first line\nstill first"


@pytest.mark.parametrize("text", ["", "TITLE: Nothing yet\n"])
def test_file_without_questions_fails_like_an_empty_json_quiz(text):
    payload = parse_quiz_text(text)

    assert payload["questions"] == []
    with pytest.raises(EmptyQuizError):
        QuizSession().load(payload)


def test_default_ids_skip_explicit_ids():
    text = (
        "ID: q2\nQ: First\nA: a\nB: b\nCORRECT: A\n\n"
        "Q: Second\nA: a\nB: b\nCORRECT: B\n\n"
        "Q: Third\nA: a\nB: b\nCORRECT: A\n"
    )

    payload = parse_quiz_text(text)

    assert [question["id"] for question in payload["questions"]] == ["q2", "q3", "q4"]
    assert len(build_quiz(payload).questions) == 3


@pytest.mark.parametrize(
    "text, message",
    [
        ("A: orphan option\nB: another\n", "Question text missing"),
        ("Q: Pick\nA: one\nB: two\nCORRECT: C\n", "undefined option"),
        ("Q: Pick\nA: one\nA: again\n", "defined twice"),
        ("just some text\n", "outside of a known section"),
        ("Q: First\nA: a\nB: b\n\nTITLE: Late title\n", "first block"),
    ],
)
def test_syntax_problems_raise_import_error(text, message):
    with pytest.raises(QuizImportError, match=message):
        parse_quiz_text(text)
