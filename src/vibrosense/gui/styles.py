"""Global styles for the application.

Buttons opt into a look through their ``role`` dynamic property
(``"primary"`` or ``"secondary"``); see :func:`styled_button`.
"""

from __future__ import annotations

from PySide6.QtWidgets import QPushButton, QWidget

STYLESHEET = """
QWidget#rootPage {
    background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                                stop:0 rgba(0, 122, 255, 77), stop:1 #ffffff);
}
QLabel {
    color: #000000;
}
QLabel[role="title"] {
    font-size: 22pt;
    font-weight: bold;
}
QLabel[role="muted"] {
    color: #808080;
}
QPushButton {
    font-weight: bold;
    padding: 10px;
    max-width: 250px;
    border-radius: 10px;
}
QPushButton[role="primary"] {
    background-color: #007aff;
    color: #ffffff;
}
QPushButton[role="secondary"] {
    background-color: rgba(255, 255, 255, 178);
    color: #007aff;
}
"""


def apply_styles(widget: QWidget) -> None:
    """Apply the application stylesheet to ``widget`` and its children."""
    widget.setStyleSheet(STYLESHEET)


def styled_button(text: str, role: str = "primary", parent: QWidget | None = None) -> QPushButton:
    button = QPushButton(text, parent)
    button.setProperty("role", role)
    return button
