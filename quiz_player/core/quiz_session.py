"""Quiz session engine shared by the Qt player and the web API."""

from __future__ import annotations

from collections.abc import Callable
import logging

from quiz_player.constants.ui_constants import PROGRESS_TEMPLATE
from quiz_player.core.errors import QuizLoadError, QuizLoadInProgressError, QuizValidationError
from quiz_player.core.models import Question, QuestionEvaluation, Quiz, QuizResult
from quiz_player.core.quiz_validation import QuizData, build_quiz
from quiz_player.core.rules import DEFAULT_RULES, QuizRules, SelectionMode
from quiz_player.core.services.quiz_source import QuizSource
from quiz_player.core.services.scoring import evaluate_question, total_score
from quiz_player.core.services.session_state import SessionState

logger = logging.getLogger(__name__)

SessionListener = Callable[["QuizSession"], None]


class QuizSession:
    """Owns one play-through: the loaded quiz, the position, and the selections.

    Views read the derived accessors and express intent only through the
    mutators (``load``, ``toggle_answer``, ``advance``, ``restart``). All
    mutators except ``load_from_source`` are synchronous and never fail.
    """

    def __init__(self, rules: QuizRules = DEFAULT_RULES) -> None:
        self._rules = rules
        self._state = SessionState()
        self._loading: bool = False
        self._listeners: list[SessionListener] = []

    @property
    def rules(self) -> QuizRules:
        return self._rules

    # --- Loading ---

    def load(self, quiz_data: QuizData) -> Quiz:
        """Validate ``quiz_data`` and, only if it passes, make it the active quiz."""
        try:
            quiz = build_quiz(quiz_data, self._rules.correctness)
        except QuizValidationError as exc:
            logger.warning("Rejected quiz payload: %s", exc)
            raise

        self._state.commit_quiz(quiz)
        logger.info(
            "Loaded quiz %r with %d question(s)", quiz.title or "(untitled)", len(quiz.questions)
        )
        self._notify()
        return quiz

    async def load_from_source(self, source: QuizSource, location: str) -> Quiz:
        """Fetch a payload from ``source`` and load it. Overlapping calls are rejected."""
        if self._loading:
            logger.warning("Ignoring load of %s: another load is in flight", location)
            raise QuizLoadInProgressError()

        self._loading = True
        try:
            payload = await source.fetch(location)
        except QuizLoadError as exc:
            logger.warning("Could not fetch quiz from %s: %s", location, exc)
            raise
        finally:
            self._loading = False
        return self.load(payload)

    def is_loading(self) -> bool:
        return self._loading

    def reset(self) -> None:
        """Discard the loaded quiz together with all progress."""
        self._state.clear()
        self._notify()

    # --- Read accessors ---

    @property
    def quiz(self) -> Quiz | None:
        return self._state.quiz

    @property
    def current_index(self) -> int:
        return self._state.current_index

    def has_loaded_quiz(self) -> bool:
        return self._state.quiz is not None

    def current_question(self) -> Question | None:
        return self._state.current_question()

    def total_questions(self) -> int:
        return self._state.question_count()

    def is_finished(self) -> bool:
        """True while on the last question, whether or not it was answered."""
        if self.current_question() is None:
            return False
        return self._state.current_index + 1 >= self.total_questions()

    def selected_answer_ids(self, question_id: str | None = None) -> frozenset[str]:
        if question_id is None:
            question = self.current_question()
            if question is None:
                return frozenset()
            question_id = question.id
        return self._state.selected_ids(question_id)

    def has_selection(self) -> bool:
        return bool(self.selected_answer_ids())

    def progress_label(self) -> str:
        if self.current_question() is None:
            return ""
        return PROGRESS_TEMPLATE.format(
            current=self._state.current_index + 1, total=self.total_questions()
        )

    # --- Mutators ---

    def toggle_answer(self, answer_id: str) -> None:
        question = self.current_question()
        if question is None:
            return
        if answer_id not in question.answer_ids():
            logger.debug("Ignoring unknown answer %r for question %s", answer_id, question.id)
            return

        if self._rules.selection is SelectionMode.SINGLE:
            self._state.replace_selection(question.id, answer_id)
        else:
            self._state.toggle_selection(question.id, answer_id)
        logger.debug(
            "Selection for %s is now %s", question.id, sorted(self._state.selected_ids(question.id))
        )
        self._notify()

    def advance(self) -> None:
        if self._state.move_next():
            self._notify()

    def restart(self) -> None:
        """Start the loaded quiz over from the first question with no selections."""
        self._state.reset_progress()
        self._notify()

    # --- Evaluation ---

    def evaluate(self, question: Question) -> QuestionEvaluation:
        return evaluate_question(question, self._state.selected_ids(question.id))

    def evaluations(self) -> list[QuestionEvaluation]:
        quiz = self._state.quiz
        if quiz is None:
            return []
        return [self.evaluate(question) for question in quiz.questions]

    def score(self) -> int:
        return total_score(self.evaluations())

    def result(self) -> QuizResult:
        evaluations = tuple(self.evaluations())
        quiz = self._state.quiz
        return QuizResult(
            title=quiz.title if quiz else None,
            score=total_score(evaluations),
            total=self.total_questions(),
            evaluations=evaluations,
        )

    # --- Change notification ---

    def subscribe(self, listener: SessionListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Session listener %r failed", listener)
