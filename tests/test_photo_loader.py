from PySide6.QtCore import QBuffer, QByteArray, QIODevice, QObject, Qt, Signal
from PySide6.QtGui import QImage
from PySide6.QtNetwork import QNetworkReply

from face_quiz.ui.photo_loader import RemotePhotoLoader, is_remote_photo

URL = "https://cdn.example.com/ada.jpg"


class FakeReply(QObject):
    finished = Signal()

    def __init__(self, payload, error=QNetworkReply.NetworkError.NoError):
        super().__init__()
        self._payload = payload
        self._error = error

    def error(self):
        return self._error

    def errorString(self):
        return "Host not found"

    def readAll(self):
        return self._payload


class FakeManager:
    def __init__(self, reply):
        self.reply = reply
        self.urls = []

    def get(self, request):
        self.urls.append(request.url().toString())
        return self.reply


def _png_bytes():
    image = QImage(8, 8, QImage.Format_RGB32)
    image.fill(Qt.blue)
    data = QByteArray()
    buffer = QBuffer(data)
    buffer.open(QIODevice.WriteOnly)
    image.save(buffer, "PNG")
    buffer.close()
    return data


def test_is_remote_photo():
    assert is_remote_photo("https://cdn.example.com/a.jpg")
    assert is_remote_photo("http://cdn.example.com/a.jpg")
    assert not is_remote_photo("/home/me/a.jpg")
    assert not is_remote_photo(None)


def test_download_is_shared_and_cached(qt_app):
    manager = FakeManager(FakeReply(_png_bytes()))
    loader = RemotePhotoLoader(manager=manager)
    received = []

    loader.request(URL, lambda url, pixmap: received.append((url, pixmap)))
    loader.request(URL, lambda url, pixmap: received.append((url, pixmap)))
    manager.reply.finished.emit()

    assert manager.urls == [URL]
    assert len(received) == 2
    assert all(url == URL and not pixmap.isNull() for url, pixmap in received)
    assert loader.cached(URL) is not None

    loader.request(URL, lambda url, pixmap: received.append((url, pixmap)))
    assert manager.urls == [URL]
    assert len(received) == 3


def test_failed_download_reports_none(qt_app):
    reply = FakeReply(QByteArray(), error=QNetworkReply.NetworkError.HostNotFoundError)
    loader = RemotePhotoLoader(manager=FakeManager(reply))
    received = []

    loader.request(URL, lambda url, pixmap: received.append(pixmap))
    reply.finished.emit()

    assert received == [None]
    assert loader.cached(URL) is None

    loader.request(URL, lambda url, pixmap: received.append(pixmap))
    assert received == [None, None]
    assert loader._manager.urls == [URL]


def test_undecodable_payload_reports_none(qt_app):
    reply = FakeReply(QByteArray(b"not an image"))
    loader = RemotePhotoLoader(manager=FakeManager(reply))
    received = []

    loader.request(URL, lambda url, pixmap: received.append(pixmap))
    reply.finished.emit()

    assert received == [None]
