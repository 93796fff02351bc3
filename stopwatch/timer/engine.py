"""Elapsed-time state machine for the stopwatch.

States
------
STOPPED    Counter frozen at 0 (fresh or after reset).
RUNNING    Counter advances by one on every ``tick()``.

Transitions
-----------
STOPPED → RUNNING        (start)
RUNNING → RUNNING        (tick, counter += 1)
Any     → STOPPED        (reset, counter and alert cleared)

The engine never schedules itself: the host calls ``tick()`` once per
second (see ``TickScheduler``) and reacts to the signals below.
"""

from __future__ import annotations

import logging
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from ..errors import ThresholdLockedError


logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TickPhase(Enum):
    EVEN = "even"
    ODD = "odd"


# ── helpers ───────────────────────────────────────────────────────────────


def format_elapsed(seconds: int) -> str:
    """``125`` → ``"02:05"``.  Minutes are never wrapped (``6000`` → ``"100:00"``)."""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def phase_for(seconds: int) -> TickPhase:
    return TickPhase.EVEN if seconds % 2 == 0 else TickPhase.ODD


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Counting stopwatch with an optional one-shot upper-limit alert.

    Signals
    -------
    ticked(elapsed_seconds: int)
        Emitted after every advancing tick, and with ``0`` on reset.
    running_changed(is_running: bool)
        Emitted on start and reset.
    phase_changed(phase: TickPhase)
        Colour phase of the progress indicator, once per tick.
    alert_fired_signal()
        Emitted at most once per run, on the first tick past the limit.
    alert_cleared()
        Emitted on reset so the host drops any alert colouring.
    threshold_changed(threshold: int | None)
        Emitted when the upper limit is set or cleared.
    """

    ticked = pyqtSignal(int)
    running_changed = pyqtSignal(bool)
    phase_changed = pyqtSignal(object)
    alert_fired_signal = pyqtSignal()
    alert_cleared = pyqtSignal()
    threshold_changed = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        threshold: int | None = None,
    ) -> None:
        super().__init__(parent)
        self._elapsed: int = 0
        self._running: bool = False
        self._threshold: int | None = _normalise_threshold(threshold)
        self._alert_fired: bool = False

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def elapsed(self) -> int:
        """Whole seconds counted since the last reset."""
        return self._elapsed

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def alert_threshold(self) -> int | None:
        """Upper limit in seconds, or ``None`` when alerting is off."""
        return self._threshold

    @property
    def alert_fired(self) -> bool:
        return self._alert_fired

    @property
    def phase(self) -> TickPhase:
        return phase_for(self._elapsed)

    def is_alert_active(self) -> bool:
        """True once the limit has been crossed in the current run."""
        return self._alert_fired

    def format_elapsed(self) -> str:
        return format_elapsed(self._elapsed)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin counting.  No-op while already running."""
        if self._running:
            return
        self._running = True
        logger.debug("stopwatch started at %s", self.format_elapsed())
        self.running_changed.emit(True)

    def tick(self) -> None:
        """Advance one second.  Ignored unless running."""
        if not self._running:
            return
        self._elapsed += 1
        self.ticked.emit(self._elapsed)

        if (
            not self._alert_fired
            and self._threshold is not None
            and self._elapsed > self._threshold
        ):
            self._alert_fired = True
            logger.info(
                "upper limit of %ds passed at %s",
                self._threshold, self.format_elapsed(),
            )
            self.alert_fired_signal.emit()

        self.phase_changed.emit(phase_for(self._elapsed))

    def reset(self) -> None:
        """Stop and zero the counter.  Always succeeds."""
        self._running = False
        self._elapsed = 0
        self._alert_fired = False
        logger.debug("stopwatch reset")
        self.ticked.emit(0)
        self.running_changed.emit(False)
        self.alert_cleared.emit()

    def set_threshold(self, value: int | None) -> None:
        """Set the upper limit in seconds.

        ``None`` or anything ``<= 0`` turns alerting off.  The limit is
        locked while running; changing it then raises
        ``ThresholdLockedError`` and leaves the old value in place.
        """
        if self._running:
            raise ThresholdLockedError(
                "cannot change the upper limit while the stopwatch is running"
            )
        self._threshold = _normalise_threshold(value)
        logger.debug("upper limit set to %s", self._threshold)
        self.threshold_changed.emit(self._threshold)


def _normalise_threshold(value: int | None) -> int | None:
    if value is None or value <= 0:
        return None
    return int(value)
