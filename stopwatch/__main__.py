"""Allow running the stopwatch as a module: python -m stopwatch."""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import StopwatchApp
from .logging_config import setup_logging
from .settings import load_settings


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="stopwatch")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", default=None, help="also log to this file")
    args, qt_args = parser.parse_known_args(argv)

    setup_logging(
        logging.DEBUG if args.debug else logging.INFO,
        log_file=args.log_file,
    )
    settings = load_settings()
    logging.getLogger(__name__).info("Stopwatch ready!")

    app = QApplication([sys.argv[0], *qt_args])
    app.setApplicationName("Stopwatch")
    app.setOrganizationName("Stopwatch")
    app.setQuitOnLastWindowClosed(not settings.minimize_to_tray)

    window = StopwatchApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
