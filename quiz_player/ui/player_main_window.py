"""Qt main window switching between the start, question and result pages."""

from __future__ import annotations

from enum import Enum, auto
import logging

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_player.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from quiz_player.constants.ui_constants import WINDOW_TITLE
from quiz_player.core.models import Quiz
from quiz_player.core.quiz_session import QuizSession
from quiz_player.styling.color_palette import Theme
from quiz_player.styling.styles import Styles
from quiz_player.ui.components.question_panel import QuestionPanel
from quiz_player.ui.components.result_panel import ResultPanel
from quiz_player.ui.components.start_panel import StartPanel
from quiz_player.ui.dialog_helpers import confirm_restart, show_info
from quiz_player.ui.quiz_load_worker import QuizLoadWorker
from quiz_player.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class PlayerPage(Enum):
    """Page currently shown by the player window."""

    START = auto()
    QUESTION = auto()
    RESULT = auto()


class PlayerMainWindow(QMainWindow):
    """Main Qt window; renders the session and forwards user intent to it."""

    # Session listeners may fire on the load worker's thread; this signal
    # carries the change back to the GUI thread.
    session_changed = Signal()

    def __init__(self, session: QuizSession, default_location: str) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(900, 640)

        self.session = session
        self._page = PlayerPage.START
        self._load_worker: QuizLoadWorker | None = None

        self._ui_font_size: int = 10
        self._question_font_size: int = 14
        self._theme: Theme = Theme.LIGHT

        self._build_ui(default_location)
        self._apply_styles()
        self.session_changed.connect(self._handle_session_changed)
        self.session.subscribe(self._emit_session_changed)

    def _build_ui(self, default_location: str) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_toolbar(root_layout)

        self.page_stack = QStackedWidget(self)
        self.start_panel = StartPanel(default_location, on_start=self._start_quiz, parent=self)
        self.question_panel = QuestionPanel(
            self.session,
            on_show_result=lambda: self._set_page(PlayerPage.RESULT),
            parent=self,
        )
        self.result_panel = ResultPanel(
            self.session,
            on_play_again=self._play_again,
            on_home=lambda: self._set_page(PlayerPage.START),
            parent=self,
        )
        self.page_stack.addWidget(self.start_panel)
        self.page_stack.addWidget(self.question_panel)
        self.page_stack.addWidget(self.result_panel)
        root_layout.addWidget(self.page_stack)

        self._set_page(PlayerPage.START)

    def _build_toolbar(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.restart_button = QPushButton("Restart", self)
        self.restart_button.clicked.connect(self._handle_restart)
        button_row.addWidget(self.restart_button)

        button_row.addStretch()

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _set_page(self, page: PlayerPage) -> None:
        self._page = page
        index_map = {
            PlayerPage.START: 0,
            PlayerPage.QUESTION: 1,
            PlayerPage.RESULT: 2,
        }
        self.restart_button.setEnabled(page == PlayerPage.QUESTION)
        if page == PlayerPage.QUESTION:
            self.question_panel.refresh()
        elif page == PlayerPage.RESULT:
            self.result_panel.refresh()
        self.page_stack.setCurrentIndex(index_map[page])

    def _emit_session_changed(self, session: QuizSession) -> None:
        self.session_changed.emit()

    def _handle_session_changed(self) -> None:
        if self._page == PlayerPage.QUESTION:
            self.question_panel.refresh()

    def _start_quiz(self, location: str) -> None:
        self.start_panel.set_loading(True)
        worker = QuizLoadWorker(self.session, location, parent=self)
        worker.loaded.connect(self._handle_quiz_loaded)
        worker.failed.connect(self._handle_quiz_load_failed)
        worker.finished.connect(self._handle_load_finished)
        self._load_worker = worker
        worker.start()

    def _handle_quiz_loaded(self, quiz: Quiz) -> None:
        self._set_page(PlayerPage.QUESTION)

    def _handle_quiz_load_failed(self, message: str) -> None:
        self.start_panel.show_error(message, self._theme)

    def _handle_load_finished(self) -> None:
        self.start_panel.set_loading(False)
        if self._load_worker is not None:
            self._load_worker.deleteLater()
            self._load_worker = None

    def _play_again(self) -> None:
        self.session.restart()
        self._set_page(PlayerPage.QUESTION)

    def _handle_restart(self) -> None:
        if self.session.has_selection() or self.session.current_index > 0:
            if not confirm_restart(self):
                return
        self.session.restart()

    def _handle_about(self) -> None:
        show_info(
            self,
            f"About {APP_NAME}",
            f"{APP_NAME} {APP_VERSION}\n\n{APP_ABOUT_TEXT}\n\n{APP_LICENSE}",
            font_point_size=self._ui_font_size,
        )

    def _handle_help(self) -> None:
        show_info(self, "Help", HELP_TEXT, font_point_size=self._ui_font_size)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            ui_font_size=self._ui_font_size,
            question_font_size=self._question_font_size,
            dark_theme=self._theme == Theme.DARK,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._question_font_size = dialog.get_question_font_size()
            self._theme = Theme.DARK if dialog.get_dark_theme() else Theme.LIGHT
            logger.info(
                "Display settings changed: ui=%dpt question=%dpt theme=%s",
                self._ui_font_size,
                self._question_font_size,
                self._theme.name,
            )
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme, self._ui_font_size))
        self.question_panel.apply_display_settings(self._question_font_size, self._theme)
        self.result_panel.apply_theme(self._theme)
        if self._page == PlayerPage.RESULT:
            self.result_panel.refresh()

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        self.session.unsubscribe(self._emit_session_changed)
        if self._load_worker is not None:
            self._load_worker.wait()
        super().closeEvent(event)
