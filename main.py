# main.py
import sys
from pathlib import Path
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from homescreen.utils.logger_utils import logger, reconfigure_logger

# Import core constants
from homescreen.core.constants import (
    APP_NAME,
    CACHE_DIR_NAME,
    CATALOG_FILE_NAME,
    CONFIG_FILE_NAME,
    LOG_DIR_NAME,
    ORG_NAME,
)

# Import services
from homescreen.services import (
    CatalogService,
    ClockService,
    ConfigService,
    IconService,
)

# Import view models
from homescreen.viewmodels import HomeViewModel

# Import the main view
from homescreen.views.main_window import MainWindow


def main():
    """The main entry point for the application."""

    # --- 1. Qt Application Setup ---
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setOrganizationName(ORG_NAME)
    app.setApplicationName(APP_NAME)

    # ---2. Composition Root: Create and Wire All Dependencies ---
    try:
        app_path = Path(".")
        config_path = app_path / CONFIG_FILE_NAME
        catalog_path = app_path / CATALOG_FILE_NAME
        cache_path = app_path / CACHE_DIR_NAME
        log_path = app_path / LOG_DIR_NAME

        # Ensure necessary directories exist
        cache_path.mkdir(parents=True, exist_ok=True)
        log_path.mkdir(parents=True, exist_ok=True)
        reconfigure_logger(log_path)
        logger.info("Application starting...")

        config_service = ConfigService(config_path)
        catalog_service = CatalogService(catalog_path)
        clock_service = ClockService()
        icon_service = IconService(cache_dir=cache_path, base_dir=app_path)

        logger.info("Core services initialized.")
    except Exception as e:
        logger.critical(f"Failed to initialize core components: {e}", exc_info=True)
        return 1

    home_vm = HomeViewModel(
        config_service=config_service,
        catalog_service=catalog_service,
        clock_service=clock_service,
    )

    # ---3. Instantiate the main window ---
    try:
        window = MainWindow(view_model=home_vm, icon_service=icon_service)
        window.show()
        logger.debug("Main Window shown.")
    except Exception as e:
        logger.critical(f"Failed to initialize or show Main Window: {e}", exc_info=True)
        return 1

    logger.info("Entering event loop...")
    exit_code = app.exec()
    logger.info(f"Application exiting with code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
