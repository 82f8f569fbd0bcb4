# homescreen/utils/logger_utils.py
"""
Shared application logger.

Every module imports `logger` from here. The underlying logging.Logger is
created on first use, so `main.py` (or the test suite) can point it at a log
directory with `set_log_directory` / `reconfigure_logger` before any file is
opened. Output goes to two handlers:

- console: colored, human-oriented, with clickable `File "...", line N` links
- file: plain text, rotated at 5 MB with 10 backups, UTF-8
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from datetime import datetime

LOGGER_NAME = "HomeScreen_App"
LOG_FILE_PREFIX = "LOG_HOMESCREEN"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 10


# ANSI escape codes for colors
class LogColors:
    RESET = "\x1b[0m"
    GREY = "\x1b[38;21m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    BOLD_RED = "\x1b[31;1m"
    CYAN = "\x1b[36m"


class ColoredFormatter(logging.Formatter):
    """
    Console formatter: green time, level-colored level and message,
    cyan clickable source location.
    """

    LOG_LEVEL_COLORS = {
        logging.DEBUG: LogColors.GREY,
        logging.INFO: LogColors.GREEN,
        logging.WARNING: LogColors.YELLOW,
        logging.ERROR: LogColors.RED,
        logging.CRITICAL: LogColors.BOLD_RED,
    }

    def __init__(self, datefmt="%B %d, %Y > %H:%M:%S"):
        super().__init__(fmt="%(message)s", datefmt=datefmt)

    def format(self, record):
        level_color = self.LOG_LEVEL_COLORS.get(record.levelno, LogColors.RESET)

        colored_time = f"{LogColors.GREEN}{self.formatTime(record, self.datefmt)}{LogColors.RESET}"
        colored_level = f"{level_color}{record.levelname:<8}{LogColors.RESET}"

        # 'File "...", line N' is clickable in most terminals and IDEs
        location = f'File "{record.pathname}", line {record.lineno} |  {record.name}:{record.funcName}'
        colored_location = f"{LogColors.CYAN}{location}{LogColors.RESET}"

        colored_message = f"{level_color}{record.getMessage()}{LogColors.RESET}"

        log_entry = f"{colored_time} | {colored_level} | {colored_location} - {colored_message}"

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
            log_entry += f"\n{LogColors.RED}{record.exc_text}{LogColors.RESET}"

        return log_entry


# Global variable to store the logger instance
_logger_instance = None
_custom_log_dir = None


def set_log_directory(log_dir):
    """
    Set custom log directory. Must be called before first use of logger;
    afterwards use reconfigure_logger() instead.
    """
    global _custom_log_dir
    _custom_log_dir = log_dir


def get_logger():
    """
    Get the logger instance. This ensures all modules get the same logger instance.
    Uses lazy initialization - logger is only created when first accessed.
    """
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = setup_logger(_custom_log_dir)
    return _logger_instance


def setup_logger(log_dir=None):
    """
    Builds the named logger with its console and rotating file handlers.
    Defaults to a `logs` folder at the project root when no directory is given.
    Calling it again replaces the handlers instead of stacking duplicates.
    """
    # === Setup log folder & file name ===
    if log_dir is None:
        log_dir = Path(__file__).resolve().parent.parent.parent / "logs"
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H-%M-%S")
    log_file_path = log_dir / f"{LOG_FILE_PREFIX}_{timestamp}.log"

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Prevents duplicate handlers when reconfigured
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    # === Console handler (manual coloring) ===
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(ColoredFormatter(datefmt="%B %d, %Y > %H:%M:%S"))
    logger.addHandler(console_handler)

    # === File handler (no color, structured) ===
    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        fmt="{asctime} | {levelname} | {name}:{funcName}:{lineno} - {message}",
        datefmt="%Y-%m-%d %H:%M:%S",
        style="{",
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    return logger


def reconfigure_logger(log_dir):
    """
    Reconfigure the existing logger with a new log directory.
    Called from main.py once the log path is known.
    """
    global _logger_instance, _custom_log_dir
    _custom_log_dir = log_dir
    _logger_instance = setup_logger(log_dir)
    return _logger_instance


class LoggerProxy:
    """
    A proxy class that forwards all logging calls to the actual logger instance.
    Importing `logger` therefore never creates log files by itself; the first
    call like `logger.info(...)` does.
    """

    def __getattr__(self, name):
        return getattr(get_logger(), name)


logger = LoggerProxy()
__all__ = ["logger", "reconfigure_logger", "set_log_directory"]
