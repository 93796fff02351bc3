"""Exceptions raised by the stopwatch."""


class StopwatchError(Exception):
    """Base class for stopwatch errors."""


class InvalidThresholdError(StopwatchError, ValueError):
    """Upper-limit text that is not a whole number."""


class ThresholdLockedError(StopwatchError):
    """The upper limit was changed while the stopwatch is running."""
