#!/usr/bin/env python3
"""Stopwatch — entry point.

Run with:
    python main.py
    python -m stopwatch
"""

from stopwatch.__main__ import main


if __name__ == "__main__":
    main()
