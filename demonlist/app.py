"""Application entry point and setup for the Demonlist viewer."""

import logging
import sys

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from demonlist.core.config import load_settings
from demonlist.core.content import ContentRepository
from demonlist.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Read settings, open the list window and start the event loop."""
    configure_logging()
    settings = load_settings()
    logging.info(f"Reading list content from {settings.data_dir}")

    app = QApplication(sys.argv)
    app.setApplicationName("Demonlist")
    app.setApplicationDisplayName("Demonlist")

    window = MainWindow(ContentRepository(settings.data_dir), dark=settings.dark)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(int(geometry.width() * 0.85), int(geometry.height() * 0.85))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
