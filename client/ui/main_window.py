# -*- coding: utf-8 -*-
"""
Main posts browser window.
"""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QAbstractItemView,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from client.services.api_client import Post


class MainWindow(QMainWindow):
    search_text_changed = Signal(str)
    fetch_all_requested = Signal()
    closing = Signal()

    def __init__(self, title: str = 'Posts Browser'):
        super().__init__()
        self.setWindowTitle(title)
        self.resize(720, 820)
        self.setMinimumSize(480, 520)
        self._build_ui()

    def _build_ui(self) -> None:
        root = QWidget()
        root.setObjectName("AppRoot")
        self.setCentralWidget(root)

        layout = QVBoxLayout(root)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText('Search posts by title')
        self.search_input.setClearButtonEnabled(True)

        self.posts_list = QListWidget()
        self.posts_list.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.posts_list.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.posts_list.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)

        footer = QHBoxLayout()
        self.status_label = QLabel('')
        self.status_label.setProperty('muted', True)
        self.fetch_btn = QPushButton('Get Posts From API')
        self.fetch_btn.setProperty('variant', 'primary')
        self.fetch_btn.setMinimumHeight(44)
        footer.addWidget(self.status_label)
        footer.addStretch()
        footer.addWidget(self.fetch_btn)

        layout.addWidget(self.search_input)
        layout.addWidget(self.posts_list)
        layout.addLayout(footer)

        self.search_input.textChanged.connect(self.search_text_changed.emit)
        self.fetch_btn.clicked.connect(self.fetch_all_requested.emit)

    @staticmethod
    def _build_post_item_widget(post: Post) -> QWidget:
        card = QFrame()
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(10, 10, 10, 10)
        card_layout.setSpacing(5)

        title_label = QLabel(post.title)
        title_label.setProperty('postTitle', True)
        title_label.setWordWrap(True)
        body_label = QLabel(post.body)
        body_label.setProperty('postBody', True)
        body_label.setWordWrap(True)

        card_layout.addWidget(title_label)
        card_layout.addWidget(body_label)
        return card

    def set_posts(self, posts: list[Post]) -> None:
        self.posts_list.clear()

        if not posts:
            empty_item = QListWidgetItem('No posts to show.')
            empty_item.setFlags(Qt.ItemFlag.NoItemFlags)
            self.posts_list.addItem(empty_item)
            return

        for post in posts:
            item = QListWidgetItem()
            widget = self._build_post_item_widget(post)
            item.setSizeHint(widget.sizeHint())
            item.setData(Qt.ItemDataRole.UserRole, post.id)
            self.posts_list.addItem(item)
            self.posts_list.setItemWidget(item, widget)

    def set_loading(self, loading: bool) -> None:
        self.fetch_btn.setEnabled(not loading)

    def show_status(self, message: str) -> None:
        self.status_label.setProperty('error', False)
        self._repolish(self.status_label)
        self.status_label.setText(message)

    def show_error(self, message: str) -> None:
        self.status_label.setProperty('error', True)
        self._repolish(self.status_label)
        self.status_label.setText(message)

    @staticmethod
    def _repolish(widget: QWidget) -> None:
        widget.style().unpolish(widget)
        widget.style().polish(widget)

    def closeEvent(self, event) -> None:  # noqa: N802
        self.closing.emit()
        super().closeEvent(event)
