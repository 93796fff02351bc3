"""Parsing of the upper-limit text the user types in."""

from __future__ import annotations

import re

from ..errors import InvalidThresholdError


_INTEGER = re.compile(r"[+-]?\d+")


def parse_threshold(text: str) -> int | None:
    """Turn dialog text into a limit in seconds.

    Blank text clears the limit.  Zero and negative numbers are returned
    as-is; the engine treats them as "no limit".
    """
    stripped = text.strip()
    if not stripped:
        return None
    if not _INTEGER.fullmatch(stripped):
        raise InvalidThresholdError(f"not a whole number: {text!r}")
    return int(stripped)
