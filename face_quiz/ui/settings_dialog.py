"""Settings dialog for configuring FaceQuiz preferences."""

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

from face_quiz.core.settings import SessionSettings
from face_quiz.styling.color_palette import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring font size, theme and quiz session settings."""

    def __init__(
        self,
        parent=None,
        font_size: int = 14,
        session_settings: SessionSettings | None = None,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._font_size = font_size
        self._session_settings = session_settings or SessionSettings()
        self._theme = theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)
        self.font_spinbox = self._add_spin_row(
            display_layout, "Quiz font size:", 10, 32, self._font_size, " pt"
        )
        self.dark_theme_checkbox = QCheckBox("Dark theme")
        self.dark_theme_checkbox.setChecked(self._theme is Theme.DARK)
        display_layout.addWidget(self.dark_theme_checkbox)
        layout.addWidget(display_group)

        quiz_group = QGroupBox("Quiz")
        quiz_layout = QVBoxLayout()
        quiz_group.setLayout(quiz_layout)
        self.round_spinbox = self._add_spin_row(
            quiz_layout, "Rounds per quiz:", 1, 50, self._session_settings.round_count, ""
        )
        self.round_spinbox.setToolTip("Takes effect when the next quiz starts.")
        self.correct_delay_spinbox = self._add_spin_row(
            quiz_layout,
            "Pause after a correct answer:",
            0,
            5000,
            self._session_settings.correct_advance_delay_ms,
            " ms",
        )
        self.incorrect_delay_spinbox = self._add_spin_row(
            quiz_layout,
            "Pause after a wrong answer:",
            0,
            5000,
            self._session_settings.incorrect_clear_delay_ms,
            " ms",
        )

        seed = self._session_settings.shuffle_seed
        self.seed_checkbox = QCheckBox("Use a fixed shuffle seed")
        self.seed_checkbox.setToolTip("Repeat the same sequence of rounds, e.g. for demonstrations.")
        self.seed_checkbox.setChecked(seed is not None)
        quiz_layout.addWidget(self.seed_checkbox)
        self.seed_spinbox = self._add_spin_row(quiz_layout, "Shuffle seed:", 0, 999_999, seed or 0, "")
        self.seed_spinbox.setEnabled(seed is not None)
        self.seed_checkbox.toggled.connect(self.seed_spinbox.setEnabled)
        layout.addWidget(quiz_group)

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

    def _add_spin_row(
        self, layout: QVBoxLayout, text: str, minimum: int, maximum: int, value: int, suffix: str
    ) -> QSpinBox:
        row = QHBoxLayout()
        spinbox = QSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setValue(value)
        if suffix:
            spinbox.setSuffix(suffix)
        row.addWidget(QLabel(text))
        row.addStretch()
        row.addWidget(spinbox)
        layout.addLayout(row)
        return spinbox

    def get_font_size(self) -> int:
        return self.font_spinbox.value()

    def get_theme(self) -> Theme:
        return Theme.DARK if self.dark_theme_checkbox.isChecked() else Theme.LIGHT

    def get_session_settings(self) -> SessionSettings:
        """Build settings from the current field values."""
        return SessionSettings(
            round_count=self.round_spinbox.value(),
            correct_advance_delay_ms=self.correct_delay_spinbox.value(),
            incorrect_clear_delay_ms=self.incorrect_delay_spinbox.value(),
            shuffle_seed=self.seed_spinbox.value() if self.seed_checkbox.isChecked() else None,
        )
