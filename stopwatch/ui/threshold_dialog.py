"""Upper-limit dialog.

A small modal dialog with one text field.  Blank clears the limit; a
whole number sets it; anything else shows an inline error and keeps the
dialog open.
"""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QWidget,
)

from ..errors import InvalidThresholdError
from ..timer.threshold import parse_threshold


class ThresholdDialog(QDialog):
    """Ask for the upper limit in seconds."""

    def __init__(
        self,
        current: int | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Set upper limit")
        self.setMinimumWidth(300)
        self.setModal(True)

        self._threshold: int | None = current
        self._build_ui()
        if current is not None:
            self._input.setText(str(current))

    # ── build ─────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(20, 16, 20, 16)
        root.setSpacing(10)

        root.addWidget(QLabel("Alert after (seconds, blank for none):", self))

        self._input = QLineEdit(self)
        self._input.setPlaceholderText("e.g. 90")
        root.addWidget(self._input)

        self._error = QLabel("", self)
        self._error.setObjectName("errorLabel")
        self._error.setVisible(False)
        root.addWidget(self._error)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._cancel_btn = QPushButton("Cancel", self)
        self._cancel_btn.clicked.connect(self.reject)
        self._ok_btn = QPushButton("OK", self)
        self._ok_btn.setObjectName("primaryButton")
        self._ok_btn.setDefault(True)
        self._ok_btn.clicked.connect(self._on_ok)
        btn_row.addWidget(self._cancel_btn)
        btn_row.addWidget(self._ok_btn)
        root.addLayout(btn_row)

    # ── slots ─────────────────────────────────────────────────────────

    def _on_ok(self) -> None:
        try:
            self._threshold = parse_threshold(self._input.text())
        except InvalidThresholdError:
            self._error.setText("Please enter a whole number of seconds.")
            self._error.setVisible(True)
            return
        self.accept()

    # ── public ────────────────────────────────────────────────────────

    def threshold(self) -> int | None:
        """The parsed limit.  Only meaningful after the dialog is accepted."""
        return self._threshold

    @property
    def error_text(self) -> str:
        return self._error.text() if self._error.isVisibleTo(self) else ""
