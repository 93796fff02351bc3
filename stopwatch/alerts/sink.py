"""Upper-limit alert delivery.

``AlertSink`` is the one capability the stopwatch host needs from a
notification backend.  ``TrayAlertSink`` delivers it as a system tray
message plus an alert sound and keeps repeating until acknowledged.
"""

from __future__ import annotations

import logging
from typing import Protocol

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..audio.sounds import SoundManager


logger = logging.getLogger(__name__)

ALERT_TITLE = "Time reached"
ALERT_BODY = "Stop now!"
ALERT_SOUND = "alert"


class AlertSink(Protocol):
    def fire(self) -> None:
        """Raise the upper-limit alert."""


class TrayAlertSink(QObject):
    """Insistent alert: notify now, then every ``repeat_seconds`` until
    ``acknowledge()`` is called.

    *tray* is anything with ``showMessage(title, body)``; when it also has
    a ``messageClicked`` signal, clicking the message acknowledges.
    """

    acknowledged = pyqtSignal()

    def __init__(
        self,
        tray=None,
        sound_manager: SoundManager | None = None,
        parent: QObject | None = None,
        *,
        repeat_seconds: int = 5,
        notifications_enabled: bool = True,
    ) -> None:
        super().__init__(parent)
        self._tray = tray
        self._sounds = sound_manager
        self._notifications_enabled = notifications_enabled
        self._active = False

        self._repeat_timer = QTimer(self)
        self._repeat_timer.timeout.connect(self._notify)
        self.set_repeat_seconds(repeat_seconds)

        clicked = getattr(tray, "messageClicked", None)
        if clicked is not None:
            clicked.connect(self.acknowledge)

    # ── public API ────────────────────────────────────────────────────

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def repeat_seconds(self) -> int:
        return self._repeat_seconds

    def set_repeat_seconds(self, seconds: int) -> None:
        self._repeat_seconds = max(0, seconds)
        if self._repeat_seconds:
            self._repeat_timer.setInterval(self._repeat_seconds * 1000)
        else:
            self._repeat_timer.stop()

    def set_notifications_enabled(self, enabled: bool) -> None:
        self._notifications_enabled = enabled

    def fire(self) -> None:
        if self._active:
            return
        self._active = True
        logger.info("alert raised")
        self._notify()
        if self._repeat_seconds:
            self._repeat_timer.start()

    def acknowledge(self) -> None:
        if not self._active:
            return
        self._active = False
        self._repeat_timer.stop()
        logger.info("alert acknowledged")
        self.acknowledged.emit()

    # ── internal ──────────────────────────────────────────────────────

    def _notify(self) -> None:
        if self._notifications_enabled and self._tray is not None:
            self._tray.showMessage(ALERT_TITLE, ALERT_BODY)
        if self._sounds is not None:
            self._sounds.play(ALERT_SOUND)
