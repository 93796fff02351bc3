"""Stopwatch with an upper-limit alert."""

__version__ = "0.1.0"
