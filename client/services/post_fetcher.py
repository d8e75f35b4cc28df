# -*- coding: utf-8 -*-
"""
Background fetch of posts with results delivered back on the UI thread.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from concurrent.futures import Executor, ThreadPoolExecutor
from enum import Enum
from typing import Callable

from PySide6.QtCore import QObject, Signal, Slot

from client.services.api_client import APIClient, ApiError, Post


logger = logging.getLogger(__name__)

SuccessCallback = Callable[[list[Post]], None]
FailureCallback = Callable[[ApiError], None]
Dispatch = Callable[[Callable[[], None]], None]


class FetchState(str, Enum):
    IDLE = 'idle'
    REQUESTING = 'requesting'
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'


class _MainThreadInvoker(QObject):
    """Runs callables on the thread this object was created on."""

    _invoke = Signal(object)

    def __init__(self):
        super().__init__()
        self._invoke.connect(self._run)

    @Slot(object)
    def _run(self, fn) -> None:
        fn()

    def post(self, fn: Callable[[], None]) -> None:
        # emitted from a worker thread, so Qt queues the call onto our thread
        self._invoke.emit(fn)


class PostFetcher:
    def __init__(
        self,
        api: APIClient,
        *,
        executor: Executor | None = None,
        dispatch: Dispatch | None = None,
        history_size: int = 32,
    ):
        self.api = api
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=4, thread_name_prefix='post-fetch')
        if dispatch is None:
            self._invoker = _MainThreadInvoker()
            dispatch = self._invoker.post
        self._dispatch = dispatch
        self._history_size = max(1, int(history_size))
        self._states: OrderedDict[int, FetchState] = OrderedDict()
        self._next_seq = 0
        self._closed = False

    def fetch_all(self, on_success: SuccessCallback, on_failure: FailureCallback) -> int | None:
        return self._submit('fetch_all', self.api.get_posts, on_success, on_failure)

    def fetch_by_query(
        self,
        term: str,
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> int | None:
        if not str(term or '').strip():
            return None
        return self._submit(
            f'fetch_by_query({term!r})',
            lambda: self.api.search_posts(term),
            on_success,
            on_failure,
        )

    def state_of(self, seq: int) -> FetchState:
        return self._states.get(seq, FetchState.IDLE)

    @property
    def latest_seq(self) -> int:
        return self._next_seq

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)

    def _set_state(self, seq: int, state: FetchState) -> None:
        self._states[seq] = state
        self._states.move_to_end(seq)
        while len(self._states) > self._history_size:
            self._states.popitem(last=False)

    def _submit(
        self,
        label: str,
        call: Callable[[], list[Post]],
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> int | None:
        if self._closed:
            return None
        self._next_seq += 1
        seq = self._next_seq
        self._set_state(seq, FetchState.REQUESTING)
        self._executor.submit(self._run, seq, label, call, on_success, on_failure)
        return seq

    def _run(
        self,
        seq: int,
        label: str,
        call: Callable[[], list[Post]],
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> None:
        try:
            posts = call()
        except ApiError as exc:
            logger.warning(f'{label} #{seq} failed: {exc}')
            error = exc
        except Exception as exc:
            logger.exception(f'{label} #{seq} raised unexpectedly')
            error = ApiError(str(exc) or exc.__class__.__name__)
        else:
            logger.info(f'{label} #{seq} received {len(posts)} posts')
            self._dispatch(lambda: self._deliver_success(seq, posts, on_success))
            return
        self._dispatch(lambda: self._deliver_failure(seq, error, on_failure))

    def _deliver_success(self, seq: int, posts: list[Post], on_success: SuccessCallback) -> None:
        if self._closed:
            return
        self._set_state(seq, FetchState.SUCCEEDED)
        on_success(posts)

    def _deliver_failure(self, seq: int, error: ApiError, on_failure: FailureCallback) -> None:
        if self._closed:
            return
        self._set_state(seq, FetchState.FAILED)
        on_failure(error)
