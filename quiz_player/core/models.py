"""Domain models for the quiz player."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Answer:
    """Candidate response to a question. ``id`` is unique within its question."""

    id: str
    text: str
    correct: bool


@dataclass(frozen=True, slots=True)
class Question:
    """Prompt with an ordered tuple of two to four answers."""

    id: str
    text: str
    answers: tuple[Answer, ...]

    def correct_answers(self) -> tuple[Answer, ...]:
        return tuple(answer for answer in self.answers if answer.correct)

    def answer_ids(self) -> frozenset[str]:
        return frozenset(answer.id for answer in self.answers)


@dataclass(frozen=True, slots=True)
class Quiz:
    """Ordered, non-empty collection of questions shown in one play-through."""

    questions: tuple[Question, ...]
    title: str | None = None


@dataclass(frozen=True, slots=True)
class QuestionEvaluation:
    """Comparison of the selected answers against the correct ones."""

    question: Question
    selected_answers: tuple[Answer, ...]
    correct_answers: tuple[Answer, ...]
    is_correct: bool


@dataclass(frozen=True, slots=True)
class QuizResult:
    """Snapshot of a finished play-through consumed by the report exporter."""

    title: str | None
    score: int
    total: int
    evaluations: tuple[QuestionEvaluation, ...]
