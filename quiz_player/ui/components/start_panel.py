"""Component for the start page: pick a quiz and load it."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_player.constants.ui_constants import (
    CHOOSE_FILE_BUTTON,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    START_BUTTON,
    START_BUTTON_LOADING,
    START_DESCRIPTION,
    START_HEADING,
)
from quiz_player.styling.color_palette import ColorPalette, Theme
from quiz_player.styling.styles import Styles


class StartPanel(QWidget):
    """UI component that asks for a quiz location and triggers loading."""

    def __init__(
        self,
        default_location: str,
        on_start: Callable[[str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self._build_ui(default_location)

    def _build_ui(self, default_location: str) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        heading = QLabel(START_HEADING, self)
        heading.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(heading)

        self.description_label = QLabel(START_DESCRIPTION, self)
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        location_row = QHBoxLayout()
        self.location_edit = QLineEdit(default_location, self)
        location_row.addWidget(self.location_edit, stretch=1)
        self.browse_button = QPushButton(CHOOSE_FILE_BUTTON, self)
        self.browse_button.clicked.connect(self._handle_browse)
        location_row.addWidget(self.browse_button)
        layout.addLayout(location_row)

        self.start_button = QPushButton(START_BUTTON, self)
        self.start_button.clicked.connect(self._handle_start_click)
        layout.addWidget(self.start_button)

        self.error_label = QLabel("", self)
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        layout.addStretch()

    def _handle_browse(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(self, IMPORT_DIALOG_TITLE, "", IMPORT_FILE_FILTER)
        if file_path:
            self.location_edit.setText(file_path)

    def _handle_start_click(self) -> None:
        location = self.location_edit.text().strip()
        if not location:
            self.show_error("Enter a quiz file or URL first.")
            return
        self.clear_error()
        self.on_start(location)

    def set_loading(self, loading: bool) -> None:
        self.start_button.setEnabled(not loading)
        self.browse_button.setEnabled(not loading)
        self.start_button.setText(START_BUTTON_LOADING if loading else START_BUTTON)

    def show_error(self, message: str, theme: Theme = Theme.LIGHT) -> None:
        self.error_label.setText(message)
        self.error_label.setStyleSheet(f"color: {ColorPalette.ERROR.get(theme)};")
        self.error_label.setVisible(True)

    def clear_error(self) -> None:
        self.error_label.clear()
        self.error_label.setVisible(False)
