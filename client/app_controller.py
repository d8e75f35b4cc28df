# -*- coding: utf-8 -*-
"""
Posts browser application controller.
"""

from __future__ import annotations

import logging
from functools import partial

from PySide6.QtCore import QObject
from PySide6.QtWidgets import QApplication

from client.services.api_client import APIClient, ApiError, DecodeError, Post, TransportError
from client.services.post_fetcher import PostFetcher
from client.services.search_debouncer import SearchDebouncer
from client.ui.main_window import MainWindow


logger = logging.getLogger(__name__)


class PostsAppController(QObject):
    def __init__(
        self,
        app: QApplication,
        base_url: str,
        *,
        debounce_ms: int = 500,
        timeout: float = 15.0,
        fetch_on_startup: bool = True,
        app_name: str = 'Posts Browser',
    ):
        super().__init__()
        self.app = app
        self.fetch_on_startup = fetch_on_startup

        self.api = APIClient(base_url, timeout=timeout)
        self.fetcher = PostFetcher(self.api)
        self.search_debouncer = SearchDebouncer(self._on_search_settled, delay_ms=debounce_ms, parent=self)
        self.main_window = MainWindow(app_name)

        self.posts: list[Post] = []
        self._request_seq = 0
        self._applied_seq = 0
        self._inflight = 0
        self._shut_down = False

        self._bind_events()

    def _bind_events(self) -> None:
        self.main_window.search_text_changed.connect(self.search_debouncer.on_input_changed)
        self.main_window.fetch_all_requested.connect(self._fetch_all)
        self.main_window.closing.connect(self.shutdown)

    def start(self) -> None:
        self.main_window.set_posts(self.posts)
        self.main_window.show()
        if self.fetch_on_startup:
            self._fetch_all()

    def _next_seq(self) -> int:
        self._request_seq += 1
        return self._request_seq

    def _fetch_all(self) -> None:
        seq = self._next_seq()
        self._inflight += 1
        issued = self.fetcher.fetch_all(
            partial(self._on_posts_loaded, seq, ''),
            partial(self._on_fetch_failed, seq),
        )
        if issued is None:
            self._inflight -= 1
        self._update_loading()

    def _on_search_settled(self, query: str) -> None:
        logger.debug(f'search settled: {query!r}')
        if not query.strip():
            return
        seq = self._next_seq()
        self._inflight += 1
        issued = self.fetcher.fetch_by_query(
            query,
            partial(self._on_posts_loaded, seq, query.strip()),
            partial(self._on_fetch_failed, seq),
        )
        if issued is None:
            self._inflight -= 1
        self._update_loading()

    def _finish_request(self) -> None:
        self._inflight = max(0, self._inflight - 1)
        self._update_loading()

    def _update_loading(self) -> None:
        if self._shut_down:
            return
        self.main_window.set_loading(self._inflight > 0)

    def _on_posts_loaded(self, seq: int, query: str, posts: list[Post]) -> None:
        self._finish_request()
        if seq < self._applied_seq:
            logger.info(f'discarding stale response #{seq} (showing #{self._applied_seq})')
            return
        self._applied_seq = seq
        self.posts = list(posts)
        self.main_window.set_posts(self.posts)
        if query:
            self.main_window.show_status(f'{len(self.posts)} posts matching "{query}"')
        else:
            self.main_window.show_status(f'{len(self.posts)} posts')

    def _on_fetch_failed(self, seq: int, error: ApiError) -> None:
        self._finish_request()
        if seq < self._applied_seq:
            logger.info(f'ignoring stale failure #{seq}: {error}')
            return
        # a failed newer request still outranks older responses still in flight
        self._applied_seq = seq
        self.main_window.show_error(self._describe_error(error))

    @staticmethod
    def _describe_error(error: ApiError) -> str:
        if isinstance(error, TransportError):
            return f'Could not reach the server: {error}'
        if isinstance(error, DecodeError):
            return f'Unexpected response from the server: {error}'
        if error.status_code:
            return f'Server returned HTTP {error.status_code}'
        return f'Request failed: {error}'

    def shutdown(self) -> None:
        if self._shut_down:
            return
        self._shut_down = True
        self.search_debouncer.close()
        self.fetcher.close()
        self.api.close()
        logger.info('posts client shut down')
