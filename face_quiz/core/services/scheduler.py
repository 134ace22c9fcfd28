"""Cancellable delayed callbacks backed by the Qt event loop."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from PySide6.QtCore import QObject, QTimer


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run ``callback`` once after ``delay_ms`` and return a handle."""

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


class QtTimerHandle:
    """Handle for one scheduled call. ``cancel`` is safe to call repeatedly."""

    def __init__(self, timer: QTimer) -> None:
        self._timer = timer
        self._done = False

    @property
    def active(self) -> bool:
        return not self._done

    def cancel(self) -> None:
        if self._done:
            return
        self._done = True
        self._timer.stop()
        self._timer.deleteLater()

    def _claim(self) -> bool:
        """Mark the call as fired. False if it was already cancelled or fired."""
        if self._done:
            return False
        self._done = True
        self._timer.deleteLater()
        return True


class QtScheduler:
    """Schedules single-shot callbacks on the thread owning the Qt event loop."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(max(0, delay_ms))
        handle = QtTimerHandle(timer)

        def _fire() -> None:
            if handle._claim():
                callback()

        timer.timeout.connect(_fire)
        timer.start()
        return handle
