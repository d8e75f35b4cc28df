# -*- coding: utf-8 -*-
"""
Debounced search input: turns every keystroke into at most one settled query.
"""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


SettledCallback = Callable[[str], None]

_NOTHING_EMITTED = object()


class SearchDebouncer:
    def __init__(
        self,
        on_settled: SettledCallback,
        *,
        delay_ms: int = 500,
        parent: QObject | None = None,
        timer=None,
    ):
        self._on_settled = on_settled
        self.delay_ms = int(delay_ms)
        self._pending_query: str | None = None
        self._last_emitted: object = _NOTHING_EMITTED
        self._closed = False
        if timer is None:
            timer = QTimer(parent)
            timer.setSingleShot(True)
            timer.setInterval(self.delay_ms)
        timer.timeout.connect(self._flush)
        self._timer = timer

    @property
    def pending_query(self) -> str | None:
        return self._pending_query

    @property
    def last_emitted(self) -> str | None:
        if self._last_emitted is _NOTHING_EMITTED:
            return None
        return self._last_emitted  # type: ignore[return-value]

    def on_input_changed(self, text: str) -> None:
        if self._closed:
            return
        self._pending_query = str(text or '')
        # restarting a running single-shot QTimer replaces the pending timeout
        self._timer.start(self.delay_ms)

    def _flush(self) -> None:
        if self._closed or self._pending_query is None:
            return
        query = self._pending_query
        self._pending_query = None
        if query == self._last_emitted:
            return
        self._last_emitted = query
        self._on_settled(query)

    def close(self) -> None:
        self._closed = True
        self._pending_query = None
        self._timer.stop()
