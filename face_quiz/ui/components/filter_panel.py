"""Component for choosing the categories and tags the quiz draws from."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from face_quiz.constants.categories import CATEGORY_LABELS, CATEGORY_ORDER, Category
from face_quiz.constants.ui_constants import (
    BUTTON_SELECT_ALL_CATEGORIES,
    BUTTON_SELECT_ALL_TAGS,
    CATEGORY_GROUP_TITLE,
    NO_TAGS_MESSAGE,
    TAG_GROUP_TITLE,
)
from face_quiz.core.contact_pool import available_tags, toggle_all
from face_quiz.core.models import Contact, FilterSelection


class FilterPanel(QWidget):
    """Category and tag toggle buttons. Reports every change through a callback."""

    def __init__(
        self,
        on_filter_changed: Callable[[FilterSelection], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_filter_changed = on_filter_changed
        self._selection = FilterSelection()
        self._contacts: list[Contact] = []
        self._available_tags: list[str] = []
        self._category_buttons: dict[Category, QPushButton] = {}
        self._tag_buttons: dict[str, QPushButton] = {}
        self._tag_row_built = False
        self._font_size: int | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.category_group = QGroupBox(CATEGORY_GROUP_TITLE, self)
        category_row = QHBoxLayout()
        self.category_group.setLayout(category_row)
        for category in CATEGORY_ORDER:
            button = QPushButton(CATEGORY_LABELS[category], self)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, c=category: self._handle_category_click(c))
            category_row.addWidget(button)
            self._category_buttons[category] = button
        category_row.addStretch()
        self.all_categories_button = QPushButton(BUTTON_SELECT_ALL_CATEGORIES, self)
        self.all_categories_button.clicked.connect(self._handle_all_categories)
        category_row.addWidget(self.all_categories_button)
        layout.addWidget(self.category_group)

        self.tag_group = QGroupBox(TAG_GROUP_TITLE, self)
        self.tag_row = QHBoxLayout()
        self.tag_group.setLayout(self.tag_row)
        self.no_tags_label = QLabel(NO_TAGS_MESSAGE, self)
        self.no_tags_label.setAlignment(Qt.AlignLeft)
        self.all_tags_button = QPushButton(BUTTON_SELECT_ALL_TAGS, self)
        self.all_tags_button.clicked.connect(self._handle_all_tags)
        layout.addWidget(self.tag_group)

        self._rebuild_tag_buttons()

    def selection(self) -> FilterSelection:
        return self._selection

    def set_contacts(self, contacts: list[Contact]) -> None:
        """Rebuild the tag row. Selected tags no contact carries any more are dropped."""
        self._contacts = list(contacts)
        self._rebuild_tag_buttons()
        kept_tags = self._selection.tags & set(self._available_tags)
        if kept_tags != self._selection.tags:
            self._apply(self._selection.with_tags(kept_tags))

    def set_selection(self, selection: FilterSelection) -> None:
        """Show ``selection`` without reporting it back as a user change."""
        self._selection = selection
        self._sync_category_buttons()
        self._rebuild_tag_buttons()

    def _handle_category_click(self, category: Category) -> None:
        self._apply(self._selection.with_category_toggled(category))

    def _handle_all_categories(self) -> None:
        categories = toggle_all(self._selection.categories, CATEGORY_ORDER)
        self._apply(self._selection.with_categories(categories))

    def _handle_tag_click(self, tag: str) -> None:
        self._apply(self._selection.with_tag_toggled(tag))

    def _handle_all_tags(self) -> None:
        tags = toggle_all(self._selection.tags, self._available_tags)
        self._apply(self._selection.with_tags(tags))

    def _apply(self, selection: FilterSelection) -> None:
        self.set_selection(selection)
        self.on_filter_changed(selection)

    def _sync_category_buttons(self) -> None:
        for category, button in self._category_buttons.items():
            button.setChecked(category in self._selection.categories)

    def _rebuild_tag_buttons(self) -> None:
        tags = available_tags(self._contacts, self._selection.categories)
        if tags != self._available_tags or not self._tag_row_built:
            self._available_tags = tags
            self._tag_row_built = True
            while self.tag_row.count():
                item = self.tag_row.takeAt(0)
                widget = item.widget()
                if widget is not None and widget not in (self.no_tags_label, self.all_tags_button):
                    widget.deleteLater()
            self._tag_buttons = {}
            for tag in tags:
                button = QPushButton(tag, self)
                button.setCheckable(True)
                if self._font_size is not None:
                    button.setStyleSheet(f"font-size: {self._font_size}pt;")
                button.clicked.connect(lambda _checked=False, t=tag: self._handle_tag_click(t))
                self.tag_row.addWidget(button)
                self._tag_buttons[tag] = button
            self.tag_row.addWidget(self.no_tags_label)
            self.tag_row.addStretch()
            self.tag_row.addWidget(self.all_tags_button)

        for tag, button in self._tag_buttons.items():
            button.setChecked(tag in self._selection.tags)
        self.no_tags_label.setVisible(not tags)
        self.all_tags_button.setEnabled(bool(tags))
        self.tag_group.setVisible(self._selection.is_active())

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        style = f"font-size: {font_size}pt;"
        for button in (*self._category_buttons.values(), *self._tag_buttons.values()):
            button.setStyleSheet(style)
        self.all_categories_button.setStyleSheet(style)
        self.all_tags_button.setStyleSheet(style)
