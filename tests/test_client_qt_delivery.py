# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import threading

import pytest
from PySide6.QtCore import QCoreApplication, QEventLoop, QTimer

from client.services.api_client import Post, TransportError
from client.services.post_fetcher import PostFetcher
from client.services.search_debouncer import SearchDebouncer


@pytest.fixture(scope='module')
def qt_app():
    os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


class _ThreadRecordingApi:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.worker_threads: list[int] = []

    def get_posts(self):
        self.worker_threads.append(threading.get_ident())
        if self.error:
            raise self.error
        return [Post(id=1, title='Hello', body='World')]

    def search_posts(self, term):
        return self.get_posts()


def _wait(loop: QEventLoop, timeout_ms: int = 5000) -> None:
    guard = QTimer()
    guard.setSingleShot(True)
    guard.timeout.connect(loop.quit)
    guard.start(timeout_ms)
    loop.exec()
    guard.stop()


def test_success_is_delivered_on_creating_thread(qt_app):
    api = _ThreadRecordingApi()
    fetcher = PostFetcher(api)
    loop = QEventLoop()
    delivered = {}

    def _ok(posts):
        delivered['thread'] = threading.get_ident()
        delivered['posts'] = posts
        loop.quit()

    def _fail(error):
        delivered['error'] = error
        loop.quit()

    try:
        fetcher.fetch_all(_ok, _fail)
        _wait(loop)
    finally:
        fetcher.close()

    main_thread = threading.get_ident()
    assert 'error' not in delivered
    assert delivered['posts'] == [Post(id=1, title='Hello', body='World')]
    assert delivered['thread'] == main_thread
    assert api.worker_threads and api.worker_threads[0] != main_thread


def test_failure_is_delivered_on_creating_thread(qt_app):
    fetcher = PostFetcher(_ThreadRecordingApi(error=TransportError('connection refused')))
    loop = QEventLoop()
    delivered = {}

    def _fail(error):
        delivered['thread'] = threading.get_ident()
        delivered['error'] = error
        loop.quit()

    try:
        fetcher.fetch_by_query('hello', lambda posts: loop.quit(), _fail)
        _wait(loop)
    finally:
        fetcher.close()

    assert isinstance(delivered['error'], TransportError)
    assert delivered['thread'] == threading.get_ident()


def test_qtimer_debounce_emits_last_value_once(qt_app):
    loop = QEventLoop()
    emitted: list[str] = []

    def _settled(query):
        emitted.append(query)
        loop.quit()

    debouncer = SearchDebouncer(_settled, delay_ms=20)
    debouncer.on_input_changed('a')
    debouncer.on_input_changed('ab')
    debouncer.on_input_changed('abc')
    _wait(loop)

    # give a second, wrongly queued timeout the chance to fire
    idle = QEventLoop()
    _wait(idle, timeout_ms=100)
    debouncer.close()

    assert emitted == ['abc']


def test_qtimer_debounce_close_cancels_pending(qt_app):
    emitted: list[str] = []
    debouncer = SearchDebouncer(emitted.append, delay_ms=20)

    debouncer.on_input_changed('never')
    debouncer.close()
    _wait(QEventLoop(), timeout_ms=100)

    assert emitted == []
