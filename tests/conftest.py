from __future__ import annotations

import copy
import os
from typing import Any

import pytest

from quiz_player.core.quiz_session import QuizSession
from quiz_player.core.services.quiz_source import QuizSource

TWO_QUESTION_QUIZ: dict[str, Any] = {
    "title": "Two questions",
    "questions": [
        {
            "id": "q1",
            "text": "First question",
            "answers": [
                {"id": "a", "text": "Alpha", "correct": True},
                {"id": "b", "text": "Beta", "correct": False},
            ],
        },
        {
            "id": "q2",
            "text": "Second question",
            "answers": [
                {"id": "c", "text": "Gamma", "correct": False},
                {"id": "d", "text": "Delta", "correct": True},
            ],
        },
    ],
}


def make_question(question_id: str, correct_flags: list[bool]) -> dict[str, Any]:
    return {
        "id": question_id,
        "text": f"Question {question_id}",
        "answers": [
            {"id": chr(ord("a") + index), "text": f"Option {index}", "correct": flag}
            for index, flag in enumerate(correct_flags)
        ],
    }


class StaticQuizSource(QuizSource):
    """Returns a fixed payload, or raises a fixed error."""

    def __init__(self, payload: Any = None, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.requested: list[str] = []

    async def fetch(self, location: str) -> Any:
        self.requested.append(location)
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.payload)


@pytest.fixture
def two_question_payload() -> dict[str, Any]:
    return copy.deepcopy(TWO_QUESTION_QUIZ)


@pytest.fixture
def session() -> QuizSession:
    return QuizSession()


@pytest.fixture
def loaded_session(session: QuizSession, two_question_payload: dict[str, Any]) -> QuizSession:
    session.load(two_question_payload)
    return session


@pytest.fixture(scope="session")
def qt_app():
    """Offscreen ``QGuiApplication`` for tests that touch Qt painting or threads."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtGui = pytest.importorskip("PySide6.QtGui")
    return QtGui.QGuiApplication.instance() or QtGui.QGuiApplication([])
