"""Settings dialog for configuring QuizPlayer display preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 10,
        question_font_size: int = 14,
        dark_theme: bool = False,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(380)

        self._ui_font_size = ui_font_size
        self._question_font_size = question_font_size
        self._dark_theme = dark_theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        ui_font_row = QHBoxLayout()
        ui_font_label = QLabel("UI Font Size (buttons, labels):")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        ui_font_row.addWidget(ui_font_label)
        ui_font_row.addStretch()
        ui_font_row.addWidget(self.ui_font_spinbox)
        font_layout.addLayout(ui_font_row)

        question_font_row = QHBoxLayout()
        question_font_label = QLabel("Question Font Size:")
        self.question_font_spinbox = QSpinBox()
        self.question_font_spinbox.setRange(10, 32)
        self.question_font_spinbox.setValue(self._question_font_size)
        self.question_font_spinbox.setSuffix(" pt")
        question_font_row.addWidget(question_font_label)
        question_font_row.addStretch()
        question_font_row.addWidget(self.question_font_spinbox)
        font_layout.addLayout(question_font_row)

        layout.addWidget(font_group)

        self.dark_theme_checkbox = QCheckBox("Use dark theme")
        self.dark_theme_checkbox.setChecked(self._dark_theme)
        layout.addWidget(self.dark_theme_checkbox)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        return self.ui_font_spinbox.value()

    def get_question_font_size(self) -> int:
        return self.question_font_spinbox.value()

    def get_dark_theme(self) -> bool:
        return self.dark_theme_checkbox.isChecked()
