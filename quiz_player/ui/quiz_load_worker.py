"""Background thread that loads a quiz without blocking the Qt event loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
import logging

from PySide6.QtCore import QObject, QThread, Signal

from quiz_player.core.errors import QuizLoadError, QuizLoadInProgressError, QuizValidationError
from quiz_player.core.quiz_session import QuizSession
from quiz_player.core.services.quiz_source import QuizSource, source_for_location

logger = logging.getLogger(__name__)


class QuizLoadWorker(QThread):
    """Runs ``QuizSession.load_from_source`` on its own asyncio loop.

    ``loaded`` carries the committed ``Quiz``; ``failed`` carries a message
    fit for the start page. Both are delivered to the GUI thread by Qt's
    queued connections.
    """

    loaded = Signal(object)
    failed = Signal(str)

    def __init__(
        self,
        session: QuizSession,
        location: str,
        source_factory: Callable[[str], QuizSource] = source_for_location,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._session = session
        self._location = location
        self._source_factory = source_factory

    def run(self) -> None:
        logger.debug("Loading quiz from %s in background", self._location)
        try:
            quiz = asyncio.run(
                self._session.load_from_source(self._source_factory(self._location), self._location)
            )
        except (QuizValidationError, QuizLoadError, QuizLoadInProgressError) as exc:
            self.failed.emit(str(exc))
            return
        self.loaded.emit(quiz)
