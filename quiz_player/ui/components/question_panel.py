"""Component that shows the current question and collects selections."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_player.constants.quiz_constants import MAX_ANSWERS_PER_QUESTION
from quiz_player.constants.ui_constants import (
    NEXT_BUTTON,
    NO_SELECTION_MESSAGE,
    SHOW_RESULT_BUTTON,
)
from quiz_player.core.quiz_session import QuizSession
from quiz_player.styling.color_palette import ColorPalette, Theme
from quiz_player.styling.styles import Styles
from quiz_player.ui.question_renderer import render_question


class QuestionPanel(QWidget):
    """UI component for answering one question at a time."""

    def __init__(
        self,
        session: QuizSession,
        on_show_result: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.session = session
        self.on_show_result = on_show_result

        self._question_font_size: int = 14
        self._theme: Theme = Theme.LIGHT
        self._rendered_question_id: str | None = None
        self._answer_ids: list[str] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.progress_label = QLabel("", self)
        layout.addWidget(self.progress_label)

        self.question_view = QWebEngineView(self)
        layout.addWidget(self.question_view, stretch=1)

        self.answer_buttons: list[QPushButton] = []
        for slot in range(MAX_ANSWERS_PER_QUESTION):
            button = QPushButton("", self)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, index=slot: self._handle_answer_click(index))
            layout.addWidget(button)
            self.answer_buttons.append(button)

        footer_row = QHBoxLayout()
        self.hint_label = QLabel(NO_SELECTION_MESSAGE, self)
        footer_row.addWidget(self.hint_label)
        footer_row.addStretch()
        self.next_button = QPushButton(NEXT_BUTTON, self)
        self.next_button.clicked.connect(self._handle_next_click)
        footer_row.addWidget(self.next_button)
        layout.addLayout(footer_row)

    def _handle_answer_click(self, slot: int) -> None:
        if slot < len(self._answer_ids):
            self.session.toggle_answer(self._answer_ids[slot])

    def _handle_next_click(self) -> None:
        if not self.session.has_selection():
            return
        if self.session.is_finished():
            self.on_show_result()
        else:
            self.session.advance()

    def refresh(self) -> None:
        """Sync widgets with the session; the prompt is only re-rendered on a new question."""
        question = self.session.current_question()
        if question is None:
            self._rendered_question_id = None
            self._answer_ids = []
            for button in self.answer_buttons:
                button.setVisible(False)
            self.next_button.setEnabled(False)
            return

        self.progress_label.setText(self.session.progress_label())
        if question.id != self._rendered_question_id:
            self._rendered_question_id = question.id
            self._render_prompt()

        selected = self.session.selected_answer_ids()
        self._answer_ids = [answer.id for answer in question.answers]
        for slot, button in enumerate(self.answer_buttons):
            if slot < len(question.answers):
                answer = question.answers[slot]
                button.setText(answer.text)
                button.setChecked(answer.id in selected)
                button.setVisible(True)
            else:
                button.setVisible(False)

        has_selection = bool(selected)
        self.next_button.setEnabled(has_selection)
        self.next_button.setText(SHOW_RESULT_BUTTON if self.session.is_finished() else NEXT_BUTTON)
        self.hint_label.setVisible(not has_selection)

    def _render_prompt(self) -> None:
        question = self.session.current_question()
        if question is None:
            return
        html = render_question(
            question,
            font_size=self._question_font_size,
            text_color=ColorPalette.TEXT_PRIMARY.get(self._theme),
        )
        self.question_view.setHtml(html)

    def apply_display_settings(self, question_font_size: int, theme: Theme) -> None:
        self._question_font_size = question_font_size
        self._theme = theme
        self.hint_label.setStyleSheet(Styles.get_muted_label_style(theme))
        self._render_prompt()
