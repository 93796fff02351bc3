"""Timer package."""

from .engine import TimerEngine, TickPhase, format_elapsed, phase_for
from .scheduler import TickScheduler, TICK_INTERVAL_MS
from .threshold import parse_threshold

__all__ = [
    "TimerEngine",
    "TickPhase",
    "format_elapsed",
    "phase_for",
    "TickScheduler",
    "TICK_INTERVAL_MS",
    "parse_threshold",
]
