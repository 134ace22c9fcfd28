"""Application entry point for FaceQuiz."""

from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from face_quiz.constants.quiz_constants import DEFAULT_CONTACTS_FILE
from face_quiz.ui.quiz_main_window import QuizMainWindow
from face_quiz.utils.logging_config import configure_logging


def _contacts_path_from_args(argv: list[str]) -> Path:
    """First non-Qt argument names the contacts file, if given."""
    for argument in argv[1:]:
        if not argument.startswith("-"):
            return Path(argument)
    return Path(DEFAULT_CONTACTS_FILE)


def main() -> None:
    """Initialize logging and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting FaceQuiz…")

    app = QApplication(sys.argv)
    contacts_path = _contacts_path_from_args(app.arguments())
    logger.info("Loading contacts from %s", contacts_path)
    window = QuizMainWindow(contacts_path=contacts_path)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
