"""Alerts package."""

from .sink import AlertSink, TrayAlertSink, ALERT_TITLE, ALERT_BODY

__all__ = ["AlertSink", "TrayAlertSink", "ALERT_TITLE", "ALERT_BODY"]
