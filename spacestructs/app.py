"""Application entry point and setup for Space Data Structures."""

import logging
import sys
from pathlib import Path

from PySide6.QtGui import QGuiApplication, QIcon
from PySide6.QtWidgets import QApplication

from spacestructs.core.engine import LevelProgressionEngine
from spacestructs.core.levels import LevelRepository
from spacestructs.core.progress import ProgressStore
from spacestructs.core.settings import Settings
from spacestructs.core.topics import TopicRepository
from spacestructs.ui.main_window import MainWindow


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Initialize the application, load level data, and start the main window."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = QApplication(sys.argv)
    app.setApplicationName("SpaceStructs")
    app.setApplicationDisplayName("Space Data Structures")

    levels = LevelRepository()
    topics = TopicRepository()
    progress_store = ProgressStore()
    engine = LevelProgressionEngine(
        levels,
        progress_store,
        seed=settings.shuffle_seed,
        unlock_all=settings.unlock_all_levels,
    )
    logging.info("Loaded %d array levels", len(levels))

    icon_path = Path(__file__).parent / "assets" / "logo.png"
    if icon_path.exists():
        app.setWindowIcon(QIcon(str(icon_path)))
    else:
        logging.debug(f"No window icon at {icon_path}")

    window = MainWindow(topics=topics, engine=engine, progress_store=progress_store)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        window.setGeometry(screen.availableGeometry())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
