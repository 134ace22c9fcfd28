"""Asynchronous loading of contact photos hosted on the web."""

from __future__ import annotations

from collections.abc import Callable
import logging

from PySide6.QtCore import QObject, QUrl
from PySide6.QtGui import QPixmap
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest

logger = logging.getLogger(__name__)

PhotoCallback = Callable[[str, QPixmap | None], None]


def is_remote_photo(photo_ref: str | None) -> bool:
    return bool(photo_ref) and photo_ref.startswith(("http://", "https://"))


class RemotePhotoLoader(QObject):
    """Fetches photos over HTTP(S) and caches the decoded pixmaps by URL.

    Callbacks receive the URL and the pixmap, or ``None`` when the download
    or decoding failed. Failed URLs are not retried, and concurrent requests
    for the same URL share one reply.
    """

    def __init__(
        self,
        parent: QObject | None = None,
        manager: QNetworkAccessManager | None = None,
    ) -> None:
        super().__init__(parent)
        self._manager = manager if manager is not None else QNetworkAccessManager(self)
        self._cache: dict[str, QPixmap] = {}
        self._failed: set[str] = set()
        self._waiting: dict[str, list[PhotoCallback]] = {}

    def cached(self, url: str) -> QPixmap | None:
        return self._cache.get(url)

    def request(self, url: str, callback: PhotoCallback) -> None:
        pixmap = self._cache.get(url)
        if pixmap is not None:
            callback(url, pixmap)
            return
        if url in self._failed:
            callback(url, None)
            return
        if url in self._waiting:
            self._waiting[url].append(callback)
            return

        self._waiting[url] = [callback]
        logger.debug("Downloading photo %s", url)
        reply = self._manager.get(QNetworkRequest(QUrl(url)))
        reply.finished.connect(lambda: self._handle_finished(url, reply))

    def _handle_finished(self, url: str, reply: QNetworkReply) -> None:
        callbacks = self._waiting.pop(url, [])
        pixmap: QPixmap | None = None
        if reply.error() == QNetworkReply.NetworkError.NoError:
            candidate = QPixmap()
            if candidate.loadFromData(reply.readAll()):
                pixmap = candidate
                self._cache[url] = pixmap
            else:
                logger.warning("Photo at %s is not a readable image", url)
        else:
            logger.warning("Could not download photo %s: %s", url, reply.errorString())
        if pixmap is None:
            self._failed.add(url)
        reply.deleteLater()

        for callback in callbacks:
            callback(url, pixmap)
