"""Component that renders the quiz session: prompt, answer options and results."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QLabel,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from face_quiz.constants.quiz_constants import OPTIONS_PER_ROUND
from face_quiz.constants.ui_constants import (
    BUTTON_PLAY_AGAIN,
    HINT_LABEL,
    LOADING_MESSAGE,
    LOADING_PHOTO_TEXT,
    NO_PHOTO_TEXT,
    NOT_ENOUGH_CONTACTS_HINT,
    NOT_ENOUGH_CONTACTS_TEMPLATE,
    PROGRESS_TEMPLATE,
    QUIZ_COMPLETE_TEMPLATE,
    QUIZ_COMPLETE_TITLE,
    SCORE_TEMPLATE,
    SELECT_CATEGORIES_MESSAGE,
    SELECT_CATEGORIES_TITLE,
)
from face_quiz.core.hint_renderer import render_hint_html
from face_quiz.core.models import FilterSelection, PromptView, SessionPhase, SessionSnapshot
from face_quiz.styling.color_palette import Theme
from face_quiz.styling.styles import Styles
from face_quiz.ui.photo_loader import RemotePhotoLoader, is_remote_photo

_PROMPT_SIZE = 250


class QuizPanel(QWidget):
    """Stateless view over ``SessionSnapshot``; every tap goes back through callbacks."""

    def __init__(
        self,
        on_answer: Callable[[str], None],
        on_play_again: Callable[[], None],
        parent: QWidget | None = None,
        photo_loader: RemotePhotoLoader | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_answer = on_answer
        self.on_play_again = on_play_again
        self._photo_loader = photo_loader if photo_loader is not None else RemotePhotoLoader(self)
        self._font_size: int = 14
        self._theme = Theme.LIGHT
        self._option_ids: list[str | None] = [None] * OPTIONS_PER_ROUND
        self._prompt: PromptView | None = None
        self._last_snapshot: SessionSnapshot | None = None
        self._last_selection = FilterSelection()

        self._build_ui()
        self._apply_theme_styles()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        self.pages = QStackedWidget(self)
        layout.addWidget(self.pages)

        self.message_page = QWidget(self)
        message_layout = QVBoxLayout()
        self.message_page.setLayout(message_layout)
        message_layout.addStretch()
        self.message_title = QLabel("", self.message_page)
        self.message_title.setAlignment(Qt.AlignCenter)
        self.message_title.setWordWrap(True)
        message_layout.addWidget(self.message_title)
        self.message_body = QLabel("", self.message_page)
        self.message_body.setAlignment(Qt.AlignCenter)
        self.message_body.setWordWrap(True)
        message_layout.addWidget(self.message_body)
        message_layout.addStretch()
        self.pages.addWidget(self.message_page)

        self.round_page = QWidget(self)
        round_layout = QVBoxLayout()
        self.round_page.setLayout(round_layout)
        self.progress_label = QLabel("", self.round_page)
        self.progress_label.setAlignment(Qt.AlignCenter)
        round_layout.addWidget(self.progress_label)
        self.score_label = QLabel("", self.round_page)
        self.score_label.setAlignment(Qt.AlignCenter)
        round_layout.addWidget(self.score_label)

        self.photo_label = QLabel(self.round_page)
        self.photo_label.setAlignment(Qt.AlignCenter)
        self.photo_label.setFixedSize(_PROMPT_SIZE, _PROMPT_SIZE)
        round_layout.addWidget(self.photo_label, alignment=Qt.AlignHCenter)

        self.hint_card = QWidget(self.round_page)
        self.hint_card.setFixedSize(_PROMPT_SIZE, _PROMPT_SIZE)
        hint_layout = QVBoxLayout()
        self.hint_card.setLayout(hint_layout)
        hint_layout.addStretch()
        self.hint_title = QLabel(HINT_LABEL.upper(), self.hint_card)
        self.hint_title.setAlignment(Qt.AlignCenter)
        hint_layout.addWidget(self.hint_title)
        self.hint_text = QLabel("", self.hint_card)
        self.hint_text.setAlignment(Qt.AlignCenter)
        self.hint_text.setWordWrap(True)
        self.hint_text.setTextFormat(Qt.RichText)
        hint_layout.addWidget(self.hint_text)
        hint_layout.addStretch()
        round_layout.addWidget(self.hint_card, alignment=Qt.AlignHCenter)

        self.option_buttons: list[QPushButton] = []
        for index in range(OPTIONS_PER_ROUND):
            button = QPushButton("", self.round_page)
            button.clicked.connect(lambda _checked=False, i=index: self._handle_option_click(i))
            round_layout.addWidget(button)
            self.option_buttons.append(button)
        round_layout.addStretch()
        self.pages.addWidget(self.round_page)

        self.complete_page = QWidget(self)
        complete_layout = QVBoxLayout()
        self.complete_page.setLayout(complete_layout)
        complete_layout.addStretch()
        self.complete_title = QLabel(QUIZ_COMPLETE_TITLE, self.complete_page)
        self.complete_title.setAlignment(Qt.AlignCenter)
        complete_layout.addWidget(self.complete_title)
        self.complete_label = QLabel("", self.complete_page)
        self.complete_label.setAlignment(Qt.AlignCenter)
        complete_layout.addWidget(self.complete_label)
        self.play_again_button = QPushButton(BUTTON_PLAY_AGAIN, self.complete_page)
        self.play_again_button.clicked.connect(self._handle_play_again)
        complete_layout.addWidget(self.play_again_button, alignment=Qt.AlignHCenter)
        complete_layout.addStretch()
        self.pages.addWidget(self.complete_page)

    def render(self, snapshot: SessionSnapshot, selection: FilterSelection) -> None:
        self._last_snapshot = snapshot
        self._last_selection = selection
        phase = snapshot.phase
        if snapshot.prompt is None:
            self._prompt = None
        if phase is SessionPhase.IDLE:
            self._show_idle(snapshot, selection)
        elif phase is SessionPhase.LOADING:
            self._show_message(LOADING_MESSAGE, "")
        elif phase is SessionPhase.COMPLETE:
            self.complete_label.setText(
                QUIZ_COMPLETE_TEMPLATE.format(score=snapshot.score, total=snapshot.total_rounds)
            )
            self.pages.setCurrentWidget(self.complete_page)
        else:
            self._show_round(snapshot)

    def _show_idle(self, snapshot: SessionSnapshot, selection: FilterSelection) -> None:
        if not selection.is_active():
            self._show_message(SELECT_CATEGORIES_TITLE, SELECT_CATEGORIES_MESSAGE)
            return
        self._show_message(
            NOT_ENOUGH_CONTACTS_TEMPLATE.format(
                count=snapshot.eligible_count, minimum=snapshot.min_pool_size
            ),
            NOT_ENOUGH_CONTACTS_HINT.format(minimum=snapshot.min_pool_size),
        )

    def _show_message(self, title: str, body: str) -> None:
        self.message_title.setText(title)
        self.message_body.setText(body)
        self.message_body.setVisible(bool(body))
        self.pages.setCurrentWidget(self.message_page)

    def _show_round(self, snapshot: SessionSnapshot) -> None:
        self.progress_label.setText(
            PROGRESS_TEMPLATE.format(current=snapshot.round_index + 1, total=snapshot.total_rounds)
        )
        self.score_label.setText(SCORE_TEMPLATE.format(score=snapshot.score))
        if snapshot.prompt is not None:
            self._show_prompt(snapshot.prompt)

        for index, button in enumerate(self.option_buttons):
            if index < len(snapshot.options):
                option = snapshot.options[index]
                self._option_ids[index] = option.contact_id
                button.setText(option.display_name)
                button.setEnabled(not option.disabled)
                button.setStyleSheet(
                    Styles.get_option_style(option.highlight, self._font_size, self._theme)
                )
                button.setVisible(True)
            else:
                self._option_ids[index] = None
                button.setVisible(False)
        self.pages.setCurrentWidget(self.round_page)

    def _show_prompt(self, prompt: PromptView) -> None:
        self._prompt = prompt
        photo_ref = prompt.photo_ref
        if is_remote_photo(photo_ref):
            pixmap = self._photo_loader.cached(photo_ref)
            if pixmap is None:
                self._show_hint_card(prompt.hint, LOADING_PHOTO_TEXT)
                self._photo_loader.request(photo_ref, self._handle_photo_loaded)
                return
        else:
            pixmap = _load_local_pixmap(photo_ref)

        if pixmap is None:
            self._show_hint_card(prompt.hint, NO_PHOTO_TEXT)
        else:
            self._show_photo(pixmap)

    def _show_photo(self, pixmap: QPixmap) -> None:
        self.photo_label.setPixmap(
            pixmap.scaled(_PROMPT_SIZE, _PROMPT_SIZE, Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation)
        )
        self.photo_label.setVisible(True)
        self.hint_card.setVisible(False)

    def _show_hint_card(self, hint: str | None, fallback_text: str) -> None:
        self.photo_label.clear()
        hint_html = render_hint_html(hint)
        if hint_html:
            self.hint_title.setVisible(True)
            self.hint_text.setText(hint_html)
        else:
            self.hint_title.setVisible(False)
            self.hint_text.setText(fallback_text)
        self.photo_label.setVisible(False)
        self.hint_card.setVisible(True)

    def _handle_photo_loaded(self, url: str, pixmap: QPixmap | None) -> None:
        # The prompt may have moved on while the download was in flight.
        if self._prompt is None or self._prompt.photo_ref != url:
            return
        if pixmap is None:
            self._show_hint_card(self._prompt.hint, NO_PHOTO_TEXT)
        else:
            self._show_photo(pixmap)

    def _handle_option_click(self, index: int) -> None:
        contact_id = self._option_ids[index]
        if contact_id is not None:
            self.on_answer(contact_id)

    def _handle_play_again(self) -> None:
        self.on_play_again()

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        label_style = f"font-size: {font_size}pt;"
        self.progress_label.setStyleSheet(label_style + " font-weight: 600;")
        self.hint_text.setStyleSheet(label_style)
        self.complete_label.setStyleSheet(label_style)
        self.play_again_button.setStyleSheet(label_style)
        self._rerender()

    def apply_theme(self, theme: Theme) -> None:
        self._theme = theme
        self._apply_theme_styles()
        self._rerender()

    def _apply_theme_styles(self) -> None:
        self.message_title.setStyleSheet(Styles.get_large_label_style())
        self.message_body.setStyleSheet(Styles.get_secondary_text_style(self._theme))
        self.score_label.setStyleSheet(Styles.get_secondary_text_style(self._theme))
        self.hint_card.setStyleSheet(Styles.get_hint_card_style(self._theme))
        self.hint_title.setStyleSheet(Styles.get_hint_label_style(self._theme))
        self.complete_title.setStyleSheet(Styles.get_large_label_style())

    def _rerender(self) -> None:
        if self._last_snapshot is not None:
            self.render(self._last_snapshot, self._last_selection)


def _load_local_pixmap(photo_ref: str | None) -> QPixmap | None:
    if not photo_ref or "://" in photo_ref:
        return None
    path = Path(photo_ref)
    if not path.is_file():
        return None
    pixmap = QPixmap(str(path))
    if pixmap.isNull():
        return None
    return pixmap
