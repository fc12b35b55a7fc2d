"""Exceptions raised while loading, playing, and exporting quizzes."""

from __future__ import annotations


class QuizValidationError(ValueError):
    """Raised when a quiz payload violates the content rules.

    Validation runs before anything is committed, so a session that raises
    this keeps whatever quiz it had before.
    """


class EmptyQuizError(QuizValidationError):
    def __init__(self) -> None:
        super().__init__("No questions found.")


class InvalidAnswerCountError(QuizValidationError):
    def __init__(self, position: int, count: int, minimum: int, maximum: int) -> None:
        self.position = position
        self.count = count
        super().__init__(
            f"Question #{position} has {count} answers (allowed {minimum}-{maximum})."
        )


class MissingCorrectAnswerError(QuizValidationError):
    def __init__(self, position: int, count: int) -> None:
        self.position = position
        self.count = count
        super().__init__(
            f"Question #{position} must have at least 1 correct answer (currently {count})."
        )


class WrongCorrectAnswerCountError(QuizValidationError):
    def __init__(self, position: int, count: int) -> None:
        self.position = position
        self.count = count
        super().__init__(
            f"Question #{position} must have exactly 1 correct answer (currently {count})."
        )


class DuplicateIdentifierError(QuizValidationError):
    """Raised when question ids repeat in a quiz or answer ids repeat in a question."""


class MalformedQuizError(QuizValidationError):
    """Raised when the payload does not have the Quiz/Question/Answer shape."""


class QuizLoadError(Exception):
    """Raised when a quiz source cannot fetch or decode a payload."""


class QuizImportError(QuizLoadError):
    """Raised when a text quiz definition cannot be parsed."""


class QuizLoadInProgressError(RuntimeError):
    """Raised when a load is requested while another one is still in flight."""

    def __init__(self) -> None:
        super().__init__("A quiz is already being loaded.")


class ReportExportError(ValueError):
    """Raised when a result report cannot be written to the requested target."""
