"""Qt main window hosting the filter panel and the quiz session."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from face_quiz.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from face_quiz.constants.quiz_constants import DEFAULT_CONTACTS_FILE
from face_quiz.constants.ui_constants import (
    BUTTON_ABOUT,
    BUTTON_HELP,
    BUTTON_IMPORT_CONTACTS,
    BUTTON_SETTINGS,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    WINDOW_TITLE,
)
from face_quiz.core.contact_importer import ContactImportError, load_contacts_from_file
from face_quiz.core.models import Contact, FilterSelection, SessionResult, SessionSnapshot
from face_quiz.core.quiz_session import QuizSession
from face_quiz.core.services.scheduler import QtScheduler
from face_quiz.core.settings import SessionSettings
from face_quiz.styling.color_palette import Theme
from face_quiz.styling.styles import Styles
from face_quiz.ui.components.filter_panel import FilterPanel
from face_quiz.ui.components.quiz_panel import QuizPanel
from face_quiz.ui.dialog_helpers import show_error, show_info
from face_quiz.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class QuizMainWindow(QMainWindow):
    """Main window. Owns the quiz session for as long as the window is open."""

    def __init__(self, contacts_path: Path | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self._font_size: int = 14
        self._theme = Theme.LIGHT
        self._last_import_path: Path | None = None

        self.session = QuizSession(
            scheduler=QtScheduler(self),
            settings=SessionSettings(),
            on_change=self._handle_session_change,
            on_complete=self._handle_session_complete,
        )

        self._build_ui()
        self._apply_styles()
        self.quiz_panel.render(self.session.snapshot(), self.session.selection)
        self._auto_load_contacts(contacts_path or Path(DEFAULT_CONTACTS_FILE))

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_toolbar(root_layout)

        self.filter_panel = FilterPanel(on_filter_changed=self._handle_filter_changed, parent=self)
        root_layout.addWidget(self.filter_panel)

        self.quiz_panel = QuizPanel(
            on_answer=self._handle_answer,
            on_play_again=self._handle_play_again,
            parent=self,
        )
        root_layout.addWidget(self.quiz_panel, stretch=1)

    def _build_toolbar(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.import_button = QPushButton(BUTTON_IMPORT_CONTACTS, self)
        self.import_button.clicked.connect(self._handle_import_contacts)
        button_row.addWidget(self.import_button)
        button_row.addStretch()

        self.settings_button = QPushButton(BUTTON_SETTINGS, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        self.help_button = QPushButton(BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.about_button = QPushButton(BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        layout.addLayout(button_row)

    # --- Session wiring ---

    def _handle_session_change(self, snapshot: SessionSnapshot) -> None:
        self.quiz_panel.render(snapshot, self.session.selection)

    def _handle_session_complete(self, result: SessionResult) -> None:
        logger.info("Session finished with %d of %d correct", result.score, result.total_rounds)

    def _handle_filter_changed(self, selection: FilterSelection) -> None:
        self.session.set_filter(selection)

    def _handle_answer(self, contact_id: str) -> None:
        self.session.submit(contact_id)

    def _handle_play_again(self) -> None:
        self.session.replay()

    def load_contacts(self, contacts: list[Contact]) -> None:
        self.session.set_contacts(contacts)
        self.filter_panel.set_contacts(contacts)

    # --- Import ---

    def _handle_import_contacts(self) -> None:
        start_dir = self._last_import_path.parent if self._last_import_path else Path.home()
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(start_dir),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            imported = load_contacts_from_file(Path(file_path))
        except (OSError, ContactImportError) as exc:
            show_error(self, "Import failed", str(exc))
            return

        self._last_import_path = imported.source_path
        self.load_contacts(imported.contacts)
        quizzable = sum(1 for contact in imported.contacts if contact.is_quizzable())
        show_info(
            self,
            "Contacts imported",
            f"Imported {len(imported.contacts)} contacts, {quizzable} with a photo or hint.",
        )

    def _auto_load_contacts(self, contacts_path: Path) -> None:
        if not contacts_path.exists():
            return
        try:
            imported = load_contacts_from_file(contacts_path)
        except (OSError, ContactImportError) as exc:
            logger.warning("Could not auto-load %s: %s", contacts_path, exc)
            return
        self._last_import_path = imported.source_path
        self.load_contacts(imported.contacts)

    # --- Dialogs ---

    def _handle_about(self) -> None:
        details = f"{APP_NAME} v{APP_VERSION}\nLicense: {APP_LICENSE}\n\n{APP_ABOUT_TEXT}"
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self._font_size, self.session.settings, self._theme)
        if dialog.exec():
            self._font_size = dialog.get_font_size()
            self._theme = dialog.get_theme()
            self.session.update_settings(dialog.get_session_settings())
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        ui_style = f"font-size: {max(8, self._font_size - 4)}pt;"
        for button in (self.import_button, self.settings_button, self.help_button, self.about_button):
            button.setStyleSheet(ui_style)
        self.filter_panel.apply_font_size(max(8, self._font_size - 2))
        self.quiz_panel.apply_font_size(self._font_size)
        self.quiz_panel.apply_theme(self._theme)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        self.session.teardown()
        super().closeEvent(event)
