"""Main application window for the stopwatch."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QIcon, QImage, QPainter, QColor, QPixmap
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QStatusBar, QSystemTrayIcon,
)

from .alerts.sink import AlertSink, TrayAlertSink
from .audio.sounds import SoundManager
from .settings import Settings, load_settings, save_settings
from .timer.engine import TimerEngine, TickPhase
from .timer.scheduler import TickScheduler
from .ui.stopwatch_widget import StopwatchWidget
from .ui.styles import build_stylesheet, PHASE_COLORS


logger = logging.getLogger(__name__)


def _make_tray_icon(running: bool) -> QIcon:
    """32×32 tray icon: filled circle while running, ring when stopped."""
    size = 64  # draw at 2× for HiDPI
    img = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
    img.fill(Qt.GlobalColor.transparent)
    p = QPainter(img)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    colour = QColor(PHASE_COLORS[TickPhase.ODD])
    if running:
        p.setPen(Qt.PenStyle.NoPen)
        p.setBrush(colour)
    else:
        pen = p.pen()
        pen.setColor(colour)
        pen.setWidth(6)
        p.setPen(pen)
        p.setBrush(Qt.BrushStyle.NoBrush)
    p.drawEllipse(8, 8, size - 16, size - 16)
    p.end()
    return QIcon(QPixmap.fromImage(img))


class StopwatchApp(QMainWindow):
    """Wires the engine, its scheduler, sounds, tray and alert delivery.

    *alert_sink* replaces the default tray/sound alert; tests pass a
    recorder here.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        alert_sink: AlertSink | None = None,
        sound_manager: SoundManager | None = None,
        persist_settings: bool = True,
    ) -> None:
        super().__init__()
        self._settings = settings or load_settings()
        self._persist = persist_settings

        self.setWindowTitle("Stopwatch")
        self.resize(self._settings.window_width, self._settings.window_height)
        self.setStyleSheet(build_stylesheet())

        # ── core ──────────────────────────────────────────────────────
        self._engine = TimerEngine(self, threshold=self._settings.alert_threshold)
        self._scheduler = TickScheduler(self._engine, self)

        # ── sounds ────────────────────────────────────────────────────
        self._sound_manager = sound_manager
        if self._sound_manager is None and self._settings.sound_enabled:
            self._sound_manager = SoundManager(self)
        if self._sound_manager is not None:
            self._sound_manager.set_volume(self._settings.sound_volume)
            self._sound_manager.set_enabled(self._settings.sound_enabled)

        # ── tray + alert ──────────────────────────────────────────────
        self._tray_icon = QSystemTrayIcon(self)
        self._tray_icon.setIcon(_make_tray_icon(False))
        self._tray_icon.setToolTip("Stopwatch 00:00")
        if QSystemTrayIcon.isSystemTrayAvailable():
            self._tray_icon.show()

        if alert_sink is None:
            alert_sink = TrayAlertSink(
                self._tray_icon,
                self._sound_manager,
                self,
                repeat_seconds=self._settings.alert_repeat_seconds,
                notifications_enabled=self._settings.notifications_enabled,
            )
        self._alert_sink = alert_sink

        # ── layout ────────────────────────────────────────────────────
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 8)
        self._widget = StopwatchWidget(self._engine, central)
        layout.addWidget(self._widget)
        self.setCentralWidget(central)

        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)
        self._status_bar.showMessage("Ready")

        # ── wire signals ──────────────────────────────────────────────
        self._engine.alert_fired_signal.connect(self._on_alert)
        self._engine.running_changed.connect(self._on_running_changed)
        self._engine.ticked.connect(self._on_tick)
        self._widget.threshold_chosen.connect(self._on_threshold_chosen)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def scheduler(self) -> TickScheduler:
        return self._scheduler

    @property
    def stopwatch_widget(self) -> StopwatchWidget:
        return self._widget

    @property
    def alert_sink(self) -> AlertSink:
        return self._alert_sink

    @property
    def settings(self) -> Settings:
        return self._settings

    # ══════════════════════════════════════════════════════════════════
    #  ENGINE SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_alert(self) -> None:
        self._status_bar.showMessage("Time reached. Stop now!")
        self._alert_sink.fire()

    def _on_running_changed(self, running: bool) -> None:
        self._tray_icon.setIcon(_make_tray_icon(running))
        if running:
            self._status_bar.showMessage("Running…")
            self._play_sound("start")
            return
        self._status_bar.showMessage("Ready")
        self._play_sound("reset")
        acknowledge = getattr(self._alert_sink, "acknowledge", None)
        if acknowledge is not None:
            acknowledge()

    def _on_tick(self, elapsed: int) -> None:
        self._tray_icon.setToolTip(
            f"Stopwatch {self._engine.format_elapsed()}"
        )

    def _on_threshold_chosen(self, threshold: int | None) -> None:
        self._settings.alert_threshold = threshold
        self._status_bar.showMessage(
            f"Upper limit: {threshold}s" if threshold else "No upper limit"
        )
        self._save_settings()

    # ══════════════════════════════════════════════════════════════════
    #  HELPERS
    # ══════════════════════════════════════════════════════════════════

    def _play_sound(self, name: str) -> None:
        if self._sound_manager is not None:
            self._sound_manager.play(name)

    def _save_settings(self) -> None:
        if not self._persist:
            return
        try:
            save_settings(self._settings)
        except OSError as exc:
            logger.warning("could not save settings: %s", exc)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Minimize to tray instead of quitting (if enabled)."""
        self._settings.window_width = self.width()
        self._settings.window_height = self.height()
        self._save_settings()
        if self._settings.minimize_to_tray and self._tray_icon.isVisible():
            event.ignore()
            self.hide()
        else:
            self._tray_icon.hide()
            event.accept()
