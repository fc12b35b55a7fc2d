"""Pydantic schemas describing the structured quiz payload.

The payload is plain structured data: an object with an optional ``title``
and a ``questions`` list, each question carrying ``id``, ``text`` and an
ordered ``answers`` list of ``{id, text, correct}`` objects. These schemas
only check the shape; the content rules live in ``quiz_validation``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from quiz_player.core.models import Answer, Question, Quiz


class AnswerPayload(BaseModel):
    """Payload schema for a single answer."""

    id: str
    text: str
    correct: bool = False

    def to_model(self) -> Answer:
        return Answer(id=self.id.strip(), text=self.text.strip(), correct=self.correct)


class QuestionPayload(BaseModel):
    """Payload schema for a question and its answers."""

    id: str
    text: str
    answers: list[AnswerPayload] = Field(default_factory=list)

    @field_validator("answers", mode="before")
    @classmethod
    def _missing_answers_are_empty(cls, value: object) -> object:
        return [] if value is None else value

    def to_model(self) -> Question:
        return Question(
            id=self.id.strip(),
            text=self.text.strip(),
            answers=tuple(answer.to_model() for answer in self.answers),
        )


class QuizPayload(BaseModel):
    """Payload schema for a whole quiz."""

    title: str | None = None
    questions: list[QuestionPayload] = Field(default_factory=list)

    def to_model(self) -> Quiz:
        title = self.title.strip() if self.title is not None else None
        return Quiz(
            questions=tuple(question.to_model() for question in self.questions),
            title=title or None,
        )
