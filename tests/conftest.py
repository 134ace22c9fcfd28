from __future__ import annotations

from collections.abc import Callable
import os
import random

import pytest

from face_quiz.constants.categories import Category
from face_quiz.core.models import Contact, FilterSelection


class ManualHandle:
    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by a virtual clock instead of the Qt event loop.

    With ``honor_cancel=False`` cancelled calls still fire, which simulates a
    timer that slipped through cancellation.
    """

    def __init__(self, honor_cancel: bool = True) -> None:
        self.now_ms = 0
        self.honor_cancel = honor_cancel
        self.handles: list[ManualHandle] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle(self.now_ms + delay_ms, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[ManualHandle]:
        return [
            handle
            for handle in self.handles
            if not handle.fired and (not handle.cancelled or not self.honor_cancel)
        ]

    def advance(self, ms: int) -> None:
        target = self.now_ms + ms
        while True:
            due = [handle for handle in self.pending if handle.due_ms <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due_ms)
            self.now_ms = handle.due_ms
            handle.fired = True
            handle.callback()
        self.now_ms = target

    def run_all(self) -> None:
        while self.pending:
            self.advance(max(handle.due_ms for handle in self.pending) - self.now_ms)


def make_contact(
    contact_id: str,
    category: Category = Category.WORK,
    tags: tuple[str, ...] = (),
    photo: str | None = "photo.jpg",
    hint: str | None = None,
    name: str | None = None,
) -> Contact:
    return Contact(
        id=contact_id,
        display_name=name or f"Person {contact_id}",
        category=category,
        tags=frozenset(tags),
        photo_ref=photo,
        hint=hint,
    )


def make_pool(size: int, category: Category = Category.WORK, prefix: str = "c") -> list[Contact]:
    return [make_contact(f"{prefix}{index}", category=category) for index in range(size)]


@pytest.fixture(scope="session")
def qt_app():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def work_filter() -> FilterSelection:
    return FilterSelection(categories=frozenset({Category.WORK}))
