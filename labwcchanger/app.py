"""QApplication bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import sys

from PySide6.QtWidgets import QApplication

from labwcchanger import __version__
from labwcchanger.config.settings import AppSettings
from labwcchanger.core.styles import StyleTableError, load_style_table
from labwcchanger.runtime_paths import builtin_styles_path
from labwcchanger.ui.main_window import MainWindow


def _configure_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("labwcchanger")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "labwcchanger.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def run_app() -> int:
    """Initialize and run the application."""
    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setApplicationName("LabwcChanger")
    app.setOrganizationName("LabwcChanger")
    settings = AppSettings()
    logger = _configure_logger(settings)
    logger.info("startup version=%s", __version__)

    try:
        style_table = load_style_table(user_path=settings.user_styles_path)
    except StyleTableError as exc:
        logger.error("bundled style table unusable at %s: %s", builtin_styles_path(), exc)
        return 1
    logger.info("loaded %d styles", len(style_table))

    window = MainWindow(settings, style_table)
    window.show()
    window.start_discovery()

    exit_code = app.exec()
    return exit_code
