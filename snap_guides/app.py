from __future__ import annotations
import sys

from loguru import logger
from PySide6.QtWidgets import QApplication

from .ui.main_window import MainWindow


def _configure_logging(verbose: bool) -> None:
    logger.enable("snap_guides")
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def main():
    verbose = "--verbose" in sys.argv or "-v" in sys.argv
    _configure_logging(verbose)

    app = QApplication(sys.argv)

    try:
        win = MainWindow()
    except Exception:
        logger.exception("Failed to build the main window")
        raise

    win.show()
    sys.exit(app.exec())

if __name__ == '__main__':
    main()
