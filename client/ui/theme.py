# -*- coding: utf-8 -*-
"""
Shared visual theme for the posts browser.
"""

from __future__ import annotations

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication


_BASE_STYLESHEET = """
QWidget {
    color: #0f172a;
    font-family: "Segoe UI Variable", "Segoe UI", "Helvetica Neue", sans-serif;
    font-size: 10.5pt;
}

QMainWindow, QWidget#AppRoot {
    background: #f1f5f9;
}

QLineEdit {
    background: #ffffff;
    border: 1px solid #cbd5e1;
    border-radius: 10px;
    padding: 8px 12px;
}

QLineEdit:focus {
    border: 2px solid #3b82f6;
}

QListWidget {
    background: #ffffff;
    border: 1px solid #e2e8f0;
    border-radius: 12px;
    padding: 6px;
}

QListWidget::item {
    border-bottom: 1px solid #f1f5f9;
}

QLabel[postTitle="true"] {
    font-size: 12pt;
    font-weight: 700;
}

QLabel[postBody="true"] {
    color: #334155;
    font-size: 10.5pt;
}

QLabel[muted="true"] {
    color: #64748b;
}

QLabel[error="true"] {
    color: #b91c1c;
}

QPushButton {
    background: #ffffff;
    border: 1px solid #cbd5e1;
    border-radius: 10px;
    padding: 8px 16px;
}

QPushButton[variant="primary"] {
    background: #3b82f6;
    border: none;
    color: #ffffff;
    font-weight: 600;
}

QPushButton[variant="primary"]:hover {
    background: #2563eb;
}

QScrollBar:vertical {
    border: none;
    background: transparent;
    width: 10px;
}

QScrollBar::handle:vertical {
    background: #cbd5e1;
    border-radius: 5px;
    min-height: 40px;
}

QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {
    border: none;
    height: 0px;
}
"""


def apply_theme(app: QApplication) -> None:
    """Apply the palette and stylesheet used by every window."""
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor("#f1f5f9"))
    palette.setColor(QPalette.WindowText, QColor("#0f172a"))
    palette.setColor(QPalette.Base, QColor("#ffffff"))
    palette.setColor(QPalette.Text, QColor("#0f172a"))
    palette.setColor(QPalette.Button, QColor("#ffffff"))
    palette.setColor(QPalette.ButtonText, QColor("#334155"))
    palette.setColor(QPalette.Highlight, QColor("#3b82f6"))
    palette.setColor(QPalette.HighlightedText, QColor("#ffffff"))
    app.setPalette(palette)
    app.setStyleSheet(_BASE_STYLESHEET)
