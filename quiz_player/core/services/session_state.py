"""Mutable state of a single play-through."""

from __future__ import annotations

from quiz_player.core.models import Question, Quiz


class SessionState:
    """Holds the loaded quiz, the question pointer, and the selections."""

    def __init__(self) -> None:
        self._quiz: Quiz | None = None
        self._current_index: int = 0
        self._selections: dict[str, set[str]] = {}

    @property
    def quiz(self) -> Quiz | None:
        return self._quiz

    @property
    def current_index(self) -> int:
        return self._current_index

    def commit_quiz(self, quiz: Quiz) -> None:
        self._quiz = quiz
        self.reset_progress()

    def reset_progress(self) -> None:
        self._current_index = 0
        self._selections = {}

    def clear(self) -> None:
        self._quiz = None
        self.reset_progress()

    def question_count(self) -> int:
        return len(self._quiz.questions) if self._quiz else 0

    def current_question(self) -> Question | None:
        if self._quiz is None:
            return None
        if not 0 <= self._current_index < len(self._quiz.questions):
            return None
        return self._quiz.questions[self._current_index]

    def move_next(self) -> bool:
        """Advance the pointer unless it already sits on the last question."""
        if self._current_index + 1 < self.question_count():
            self._current_index += 1
            return True
        return False

    def selected_ids(self, question_id: str) -> frozenset[str]:
        return frozenset(self._selections.get(question_id, ()))

    def toggle_selection(self, question_id: str, answer_id: str) -> None:
        selected = self._selections.setdefault(question_id, set())
        if answer_id in selected:
            selected.remove(answer_id)
        else:
            selected.add(answer_id)

    def replace_selection(self, question_id: str, answer_id: str) -> None:
        if self._selections.get(question_id) == {answer_id}:
            self._selections[question_id] = set()
        else:
            self._selections[question_id] = {answer_id}
