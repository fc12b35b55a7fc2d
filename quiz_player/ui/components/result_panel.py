"""Component for the result page: score, breakdown and report export."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_player.constants.quiz_constants import DEFAULT_REPORT_FILENAME
from quiz_player.constants.ui_constants import (
    EXPORT_BUTTON,
    EXPORT_DIALOG_TITLE,
    EXPORT_FILE_FILTER,
    HOME_BUTTON,
    NOTHING_SELECTED,
    PLAY_AGAIN_BUTTON,
    RESULT_HEADING,
    SCORE_TEMPLATE,
    VERDICT_CORRECT,
    VERDICT_WRONG,
)
from quiz_player.core.errors import ReportExportError
from quiz_player.core.quiz_session import QuizSession
from quiz_player.core.result_exporter import save_result_report
from quiz_player.styling.color_palette import ColorPalette, Theme
from quiz_player.styling.styles import Styles
from quiz_player.ui.dialog_helpers import show_error, show_info


class ResultPanel(QWidget):
    """UI component listing the per-question evaluation of a finished quiz."""

    def __init__(
        self,
        session: QuizSession,
        on_play_again: Callable[[], None],
        on_home: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.session = session
        self.on_play_again = on_play_again
        self.on_home = on_home
        self._theme: Theme = Theme.LIGHT
        self._last_export_path: Path | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        heading = QLabel(RESULT_HEADING, self)
        heading.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(heading)

        self.score_label = QLabel("", self)
        layout.addWidget(self.score_label)

        self.breakdown_list = QListWidget(self)
        self.breakdown_list.setWordWrap(True)
        layout.addWidget(self.breakdown_list, stretch=1)

        button_row = QHBoxLayout()
        self.again_button = QPushButton(PLAY_AGAIN_BUTTON, self)
        self.again_button.clicked.connect(lambda: self.on_play_again())
        button_row.addWidget(self.again_button)

        self.home_button = QPushButton(HOME_BUTTON, self)
        self.home_button.clicked.connect(lambda: self.on_home())
        button_row.addWidget(self.home_button)

        button_row.addStretch()

        self.export_button = QPushButton(EXPORT_BUTTON, self)
        self.export_button.clicked.connect(self._handle_export)
        button_row.addWidget(self.export_button)
        layout.addLayout(button_row)

    def refresh(self) -> None:
        result = self.session.result()
        self.score_label.setText(SCORE_TEMPLATE.format(score=result.score, total=result.total))
        self.breakdown_list.clear()
        for position, evaluation in enumerate(result.evaluations, start=1):
            selected = "; ".join(a.text for a in evaluation.selected_answers) or NOTHING_SELECTED
            correct = "; ".join(a.text for a in evaluation.correct_answers)
            verdict = VERDICT_CORRECT if evaluation.is_correct else VERDICT_WRONG
            item = QListWidgetItem(
                f"{position}. {evaluation.question.text}\n"
                f"   Your answer: {selected}\n"
                f"   Correct answer: {correct}\n"
                f"   {verdict}",
                self.breakdown_list,
            )
            color = ColorPalette.SUCCESS if evaluation.is_correct else ColorPalette.ERROR
            item.setForeground(QColor(color.get(self._theme)))

    def _handle_export(self) -> None:
        start_path = str(self._last_export_path or Path.cwd() / DEFAULT_REPORT_FILENAME)
        file_path, _ = QFileDialog.getSaveFileName(self, EXPORT_DIALOG_TITLE, start_path, EXPORT_FILE_FILTER)
        if not file_path:
            return
        try:
            saved = save_result_report(Path(file_path), self.session.result())
        except ReportExportError as exc:
            show_error(self, "Export failed", str(exc))
            return
        self._last_export_path = saved
        show_info(self, "Report saved", f"Report saved to {saved}")

    def apply_theme(self, theme: Theme) -> None:
        self._theme = theme
