"""Allow running IntervalTimer as a module: python -m intervaltimer."""

import sys

from loguru import logger
from PyQt6.QtWidgets import QApplication

from .database.db import init_db
from .logger import setup_logger
from .settings import load_settings
from .app import IntervalTimerApp


def main() -> None:
    settings = load_settings()
    setup_logger(level=settings.log_level, log_file=settings.log_file)
    init_db()

    app = QApplication(sys.argv)
    app.setApplicationName("IntervalTimer")
    app.setOrganizationName("IntervalTimer")

    window = IntervalTimerApp(settings)
    window.show()
    logger.info("IntervalTimer ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
