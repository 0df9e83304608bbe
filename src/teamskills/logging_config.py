"""
Logging Configuration
Sets up the package logger for the application.

Normal runs log load/sort events at INFO. With ``--debug`` every selection,
hover and rejected group operation is logged too, with the emitting function
and line in each record.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "teamskills"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEBUG_LOG_FORMAT = '%(asctime)s - %(name)s:%(funcName)s:%(lineno)d - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

# Third-party loggers that flood the console at DEBUG
QUIET_LOGGERS = ("pyqtgraph",)


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'teamskills' logger and returns it.

    Args:
        debug: Log at DEBUG level with function/line info instead of INFO.
        log_file: Optional path to save logs to a file (overwritten per run).
    """
    level = logging.DEBUG if debug else logging.INFO
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Re-running main() in one interpreter must not stack handlers
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(DEBUG_LOG_FORMAT if debug else LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info(f"Logging initialized ({logging.getLevelName(level)}).")
    return logger
