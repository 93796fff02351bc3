"""Shared test helpers for the stopwatch."""

from PyQt6.QtCore import QObject, pyqtSignal

from stopwatch.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeTray(QObject):
    """Stands in for QSystemTrayIcon: records every message shown."""

    messageClicked = pyqtSignal()

    def __init__(self):
        super().__init__()
        self.messages: list[tuple[str, str]] = []

    def showMessage(self, title, body):
        self.messages.append((title, body))


class RecordingAlertSink:
    """AlertSink that only counts."""

    def __init__(self):
        self.fired = 0
        self.acknowledged = 0

    def fire(self):
        self.fired += 1

    def acknowledge(self):
        self.acknowledged += 1


def run_ticks(engine: TimerEngine, count: int) -> None:
    for _ in range(count):
        engine.tick()
