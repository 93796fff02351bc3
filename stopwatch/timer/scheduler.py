"""Once-a-second driver for a ``TimerEngine``."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer

from .engine import TimerEngine


logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class TickScheduler(QObject):
    """Owns the single ``QTimer`` that calls ``engine.tick()``.

    The timer follows ``engine.running_changed``: it starts when the
    engine starts and stops on reset, so only one tick is ever pending.
    """

    def __init__(
        self,
        engine: TimerEngine,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_timeout)
        engine.running_changed.connect(self._on_running_changed)

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    def _on_running_changed(self, running: bool) -> None:
        if running:
            if not self._qt_timer.isActive():
                self._qt_timer.start()
        else:
            self._qt_timer.stop()

    def _on_timeout(self) -> None:
        if not self._engine.is_running:
            self._qt_timer.stop()
            return
        self._engine.tick()
