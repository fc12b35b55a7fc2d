from __future__ import annotations

import threading

import pytest

pytest.importorskip("PySide6.QtWidgets")
pytest.importorskip("PySide6.QtWebEngineWidgets")

from PySide6.QtCore import QCoreApplication  # noqa: E402

from conftest import StaticQuizSource, make_question  # noqa: E402
from quiz_player.core.errors import QuizLoadError  # noqa: E402
from quiz_player.core.models import Quiz  # noqa: E402
from quiz_player.ui.quiz_load_worker import QuizLoadWorker  # noqa: E402


class ThreadRecordingSource(StaticQuizSource):
    """Remembers which thread performed the fetch."""

    def __init__(self, payload):
        super().__init__(payload)
        self.fetch_thread: int | None = None

    async def fetch(self, location):
        self.fetch_thread = threading.get_ident()
        return await super().fetch(location)


def _run_worker(worker: QuizLoadWorker) -> tuple[list, list]:
    loaded: list = []
    failed: list = []
    worker.loaded.connect(loaded.append)
    worker.failed.connect(failed.append)
    worker.start()
    assert worker.wait(5000)
    QCoreApplication.processEvents()
    return loaded, failed


def test_load_runs_off_the_calling_thread(qt_app, session, two_question_payload):
    source = ThreadRecordingSource(two_question_payload)
    worker = QuizLoadWorker(session, "quiz.json", source_factory=lambda location: source)

    loaded, failed = _run_worker(worker)

    assert failed == []
    assert len(loaded) == 1 and isinstance(loaded[0], Quiz)
    assert source.fetch_thread is not None
    assert source.fetch_thread != threading.get_ident()
    assert session.total_questions() == 2
    assert session.is_loading() is False


def test_validation_failure_is_reported_as_a_message(qt_app, session):
    payload = {"questions": [make_question("q1", [False, False])]}
    worker = QuizLoadWorker(
        session, "quiz.json", source_factory=lambda location: StaticQuizSource(payload)
    )

    loaded, failed = _run_worker(worker)

    assert loaded == []
    assert len(failed) == 1 and "Question #1" in failed[0]
    assert session.has_loaded_quiz() is False


def test_transport_failure_is_reported_as_a_message(qt_app, session):
    source = StaticQuizSource(error=QuizLoadError("connection refused"))
    worker = QuizLoadWorker(session, "quiz.json", source_factory=lambda location: source)

    loaded, failed = _run_worker(worker)

    assert loaded == []
    assert failed == ["connection refused"]
