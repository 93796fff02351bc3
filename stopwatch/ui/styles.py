"""QSS stylesheet and state colours for the stopwatch."""

from __future__ import annotations

from ..timer.engine import TickPhase

# ── progress indicator tint, alternating every second ──────────────────

PHASE_COLORS: dict[TickPhase, str] = {
    TickPhase.EVEN: "#AC8AFF",
    TickPhase.ODD:  "#8C5AFF",
}

# ── time label ───────────────────────────────────────────────────────────

TEXT_NEUTRAL = "#1E1E2E"
TEXT_ALERT = "#FF0000"

_PALETTE: dict[str, str] = {
    "bg":         "#F5F3FF",
    "surface":    "#FFFFFF",
    "accent":     "#8C5AFF",
    "text":       TEXT_NEUTRAL,
    "text_muted": "#7A7A9A",
    "danger":     "#F38BA8",
    "border":     "#DCD6F7",
}


def time_label_style(alert: bool) -> str:
    colour = TEXT_ALERT if alert else TEXT_NEUTRAL
    return f"font-size: 56px; font-weight: 600; color: {colour};"


def progress_style(phase: TickPhase) -> str:
    """Stylesheet that tints the indeterminate progress bar chunk."""
    return (
        "QProgressBar { border: none; background: transparent; height: 6px; }"
        f"QProgressBar::chunk {{ background-color: {PHASE_COLORS[phase]}; }}"
    )


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    """Application-wide QSS."""
    p = dict(_PALETTE)
    if palette:
        p.update(palette)
    return f"""
    QMainWindow, QDialog {{
        background-color: {p['bg']};
        color: {p['text']};
    }}
    QFrame#card {{
        background-color: {p['surface']};
        border: 1px solid {p['border']};
        border-radius: 14px;
    }}
    QPushButton {{
        padding: 8px 18px;
        border-radius: 8px;
        border: 1px solid {p['border']};
        background-color: {p['surface']};
        color: {p['text']};
    }}
    QPushButton#primaryButton {{
        background-color: {p['accent']};
        border: none;
        color: white;
        font-weight: 600;
    }}
    QPushButton#dangerButton {{
        color: {p['danger']};
    }}
    QPushButton:disabled {{
        color: {p['text_muted']};
    }}
    QLabel#errorLabel {{
        color: {p['danger']};
    }}
    """
