"""Application settings with JSON persistence.

Settings are stored at:
    ~/.stopwatch/settings.json   (override the directory with STOPWATCH_HOME)

Usage::

    settings = load_settings()
    settings.alert_threshold = 90
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import get_args, get_type_hints


logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path(
    os.environ.get("STOPWATCH_HOME", Path.home() / ".stopwatch")
)
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── alert ─────────────────────────────────────────────────────────
    alert_threshold: int | None = None     # seconds; None = no limit
    alert_repeat_seconds: int = 5          # 0 = notify once only

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── notifications ─────────────────────────────────────────────────
    notifications_enabled: bool = True

    # ── window ────────────────────────────────────────────────────────
    minimize_to_tray: bool = False
    window_width: int = 360
    window_height: int = 280


def _value_fits(value, hint) -> bool:
    """True if a JSON value matches a ``Settings`` field annotation."""
    allowed = get_args(hint) or (hint,)
    if value is None:
        return type(None) in allowed
    if isinstance(value, bool):
        return bool in allowed
    return any(
        t is not bool and t is not type(None) and isinstance(value, t)
        for t in allowed
    )


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults.

    Unknown keys are ignored; keys whose value has the wrong type are
    dropped with a warning so their defaults apply.
    """
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        hints = get_type_hints(Settings)
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {}
        for key, value in data.items():
            if key not in valid_keys:
                continue
            if not _value_fits(value, hints[key]):
                logger.warning(
                    "ignoring setting %s=%r in %s: wrong type",
                    key, value, SETTINGS_PATH,
                )
                continue
            filtered[key] = value
        return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("ignoring unreadable settings at %s: %s", SETTINGS_PATH, exc)
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
