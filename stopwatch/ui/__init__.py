"""UI package."""

from .stopwatch_widget import StopwatchWidget
from .threshold_dialog import ThresholdDialog

__all__ = ["StopwatchWidget", "ThresholdDialog"]
