"""Main stopwatch card.

Layout (top → bottom):
    - Elapsed time label (MM:SS), red once the upper limit is passed
    - Indeterminate progress bar, shown while running, tint alternating
      every second
    - Start / Reset / Settings buttons
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
    QProgressBar,
)

from ..errors import ThresholdLockedError
from ..timer.engine import TimerEngine, TickPhase, format_elapsed
from .styles import time_label_style, progress_style
from .threshold_dialog import ThresholdDialog


logger = logging.getLogger(__name__)


class StopwatchWidget(QWidget):
    """Renders a ``TimerEngine`` and forwards button clicks to it."""

    threshold_chosen = pyqtSignal(object)

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._alert = False
        self._build_ui()
        self._connect_signals()
        self._refresh_display(engine.elapsed)
        self._on_running_changed(engine.is_running)
        self._on_phase_changed(engine.phase)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(14)

        self._time_label = QLabel("00:00", card)
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._time_label.setStyleSheet(time_label_style(False))
        layout.addWidget(self._time_label)

        self._progress = QProgressBar(card)
        self._progress.setRange(0, 0)  # indeterminate
        self._progress.setTextVisible(False)
        layout.addWidget(self._progress)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(10)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_btn = QPushButton("Start", card)
        self._start_btn.setObjectName("primaryButton")
        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setObjectName("dangerButton")
        self._settings_btn = QPushButton("Settings", card)

        btn_row.addWidget(self._start_btn)
        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._settings_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_btn.clicked.connect(self._engine.start)
        self._reset_btn.clicked.connect(self._engine.reset)
        self._settings_btn.clicked.connect(self.open_threshold_dialog)

        self._engine.ticked.connect(self._refresh_display)
        self._engine.running_changed.connect(self._on_running_changed)
        self._engine.phase_changed.connect(self._on_phase_changed)
        self._engine.alert_fired_signal.connect(self._on_alert)
        self._engine.alert_cleared.connect(self._on_alert_cleared)

    # ── slots ─────────────────────────────────────────────────────────────

    def _refresh_display(self, elapsed: int) -> None:
        self._time_label.setText(format_elapsed(elapsed))

    def _on_running_changed(self, running: bool) -> None:
        self._progress.setVisible(running)
        self._settings_btn.setEnabled(not running)

    def _on_phase_changed(self, phase: TickPhase) -> None:
        self._progress.setStyleSheet(progress_style(phase))

    def _on_alert(self) -> None:
        self._alert = True
        self._time_label.setStyleSheet(time_label_style(True))

    def _on_alert_cleared(self) -> None:
        self._alert = False
        self._time_label.setStyleSheet(time_label_style(False))

    def open_threshold_dialog(self) -> None:
        dialog = ThresholdDialog(self._engine.alert_threshold, self)
        if not dialog.exec():
            return
        self.apply_threshold(dialog.threshold())

    def apply_threshold(self, value: int | None) -> bool:
        """Hand a parsed limit to the engine.  False if it was refused."""
        try:
            self._engine.set_threshold(value)
        except ThresholdLockedError as exc:
            logger.warning("%s", exc)
            return False
        self.threshold_chosen.emit(self._engine.alert_threshold)
        return True

    # ── read-only view state ─────────────────────────────────────────────

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def is_alert_shown(self) -> bool:
        return self._alert

    @property
    def progress_visible(self) -> bool:
        return self._progress.isVisibleTo(self)

    @property
    def settings_enabled(self) -> bool:
        return self._settings_btn.isEnabled()

    @property
    def start_button(self) -> QPushButton:
        return self._start_btn

    @property
    def reset_button(self) -> QPushButton:
        return self._reset_btn
