"""Shared pytest fixtures for the stopwatch tests."""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PyQt6.QtWidgets import QApplication

from stopwatch.timer.engine import TimerEngine


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from the real settings file."""
    monkeypatch.setattr("stopwatch.settings.APP_SUPPORT_DIR", tmp_path)
    monkeypatch.setattr(
        "stopwatch.settings.SETTINGS_PATH", tmp_path / "settings.json",
    )
    yield tmp_path


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine with no upper limit."""
    return TimerEngine(parent=None)
