"""Content and selection rules a quiz session is played under."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CorrectnessPolicy(Enum):
    """How many answers of a question may be flagged correct."""

    AT_LEAST_ONE = auto()
    EXACTLY_ONE = auto()


class SelectionMode(Enum):
    """How choosing an answer changes the selection of the current question."""

    MULTIPLE = auto()  # toggle membership
    SINGLE = auto()  # replace the whole selection


@dataclass(frozen=True, slots=True)
class QuizRules:
    correctness: CorrectnessPolicy = CorrectnessPolicy.AT_LEAST_ONE
    selection: SelectionMode = SelectionMode.MULTIPLE

    @classmethod
    def single_choice(cls) -> QuizRules:
        """Strict pairing: one correct answer per question, one selection."""
        return cls(correctness=CorrectnessPolicy.EXACTLY_ONE, selection=SelectionMode.SINGLE)


DEFAULT_RULES = QuizRules()
