"""On-screen Korean keyboard widget.

Renders `KOREAN_ROWS` as push buttons above a read-only display and forwards
every press to a `KeyboardSession`. Composition lives entirely in the session
and the domain layer; this module only builds widgets and routes events.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from app.controllers.keyboard_session import KeyboardSession
from app.domain.enums import SpecialKey
from app.domain.keyboard_layout import KOREAN_ROWS, SHIFT_VARIANTS, jamo_for_keystroke, shifted_label

logger = logging.getLogger(__name__)

_SPECIAL_LABELS: dict[SpecialKey, str] = {
    SpecialKey.BACKSPACE: "⌫",
    SpecialKey.SHIFT: "⇧",
    SpecialKey.SPACE: " ",
    SpecialKey.ENTER: "⏎",
    SpecialKey.SUBMIT: "완료",
}

_SPECIAL_STRETCH: dict[SpecialKey, int] = {
    SpecialKey.SPACE: 6,
    SpecialKey.SUBMIT: 2,
}


class VirtualKeyboardWidget(QWidget):
    textChanged = pyqtSignal(str)
    submitted = pyqtSignal(str)

    def __init__(self, session: Optional[KeyboardSession] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("VirtualKeyboard")
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self._session = session if session is not None else KeyboardSession()
        self._jamo_buttons: dict[str, QPushButton] = {}
        self._special_buttons: dict[SpecialKey, QPushButton] = {}

        self._display = QLineEdit(self)
        self._build_ui()

        self._session.on_change(self._on_session_changed)
        self._session.on_submit(self.submitted.emit)
        self._on_session_changed(self._session.text)

    # ----- accessors -----
    def session(self) -> KeyboardSession:
        return self._session

    def display(self) -> QLineEdit:
        return self._display

    def button_for(self, key: str) -> Optional[QPushButton]:
        """Return the button for a base jamo label or a SpecialKey."""
        try:
            return self._special_buttons[SpecialKey(key)]
        except ValueError:
            return self._jamo_buttons.get(key)

    # ----- UI -----
    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(16, 12, 16, 12)
        root.setSpacing(8)

        self._display.setObjectName("vkDisplay")
        self._display.setReadOnly(True)
        self._display.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        f = QFont()
        f.setPointSize(24)
        self._display.setFont(f)
        root.addWidget(self._display)

        for row in KOREAN_ROWS:
            hbox = QHBoxLayout()
            hbox.setSpacing(6)
            for key in row:
                btn = self._make_button(key)
                stretch = _SPECIAL_STRETCH.get(key, 1) if isinstance(key, SpecialKey) else 1
                hbox.addWidget(btn, stretch)
            root.addLayout(hbox)

    def _make_button(self, key: str) -> QPushButton:
        btn = QPushButton(self)
        btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        btn.setMinimumHeight(64)
        btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        if isinstance(key, SpecialKey):
            btn.setText(_SPECIAL_LABELS[key])
            btn.setObjectName("vk%s" % key.value)
            if key is SpecialKey.SHIFT:
                btn.setCheckable(True)
            self._special_buttons[key] = btn
        else:
            btn.setText(key)
            btn.setObjectName("vkKey_%s" % key)
            self._jamo_buttons[key] = btn

        btn.clicked.connect(lambda _checked=False, k=key: self._on_key_clicked(k))
        return btn

    def _refresh_shift(self) -> None:
        shifted = self._session.shifted
        shift_btn = self._special_buttons.get(SpecialKey.SHIFT)
        if shift_btn is not None:
            shift_btn.blockSignals(True)
            shift_btn.setChecked(shifted)
            shift_btn.blockSignals(False)
        for label in SHIFT_VARIANTS:
            btn = self._jamo_buttons.get(label)
            if btn is not None:
                btn.setText(shifted_label(label) if shifted else label)

    # ----- events -----
    def _on_key_clicked(self, key: str) -> None:
        self._session.press_key(key)
        self._refresh_shift()

    def _on_session_changed(self, text: str) -> None:
        self._display.setText(text)
        self._display.setCursorPosition(len(text))
        submit_btn = self._special_buttons.get(SpecialKey.SUBMIT)
        if submit_btn is not None:
            submit_btn.setEnabled(self._session.can_submit)
        self.textChanged.emit(text)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        key = event.key()
        if key == Qt.Key.Key_Backspace:
            self._session.backspace()
            return
        if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self._session.enter()
            return
        if key == Qt.Key.Key_Space:
            self._session.space()
            return

        text = event.text()
        jamo = jamo_for_keystroke(text)
        if jamo is not None:
            self._session.press_jamo(jamo)
            return
        if text.isascii() and text.isdigit():
            self._session.insert_literal(text)
            return
        super().keyPressEvent(event)
