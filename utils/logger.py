"""
Logging configuration for the Timesheet Dashboard.

Logs go to the console (visible under ``streamlit run``) and to
``logs/dashboard.log``, which is recreated on every start.
"""

import logging
import sys
from pathlib import Path

CONSOLE_FORMAT = '%(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_FILE_NAME = 'dashboard.log'


def setup_logging(log_level=logging.INFO, log_dir='logs'):
    """
    Configure the root logger with a console handler and a file handler.

    Args:
        log_level: The logging level (default: logging.INFO)
        log_dir: Directory for the log file, created if missing

    Returns:
        logging.Logger: Configured root logger
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / LOG_FILE_NAME

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Streamlit reruns the script; avoid stacking handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)

    logger.info(f"Logging initialized. Log file: {log_file}")
    logger.info(f"Log level: {logging.getLevelName(log_level)}")

    _route_streamlit_loggers(file_handler)

    return logger


def _route_streamlit_loggers(file_handler):
    """Send Streamlit's own loggers to the dashboard log file as well."""
    for logger_name in list(logging.root.manager.loggerDict):
        if logger_name.startswith('streamlit'):
            st_log = logging.getLogger(logger_name)
            st_log.propagate = True
            if not any(isinstance(h, logging.FileHandler) for h in st_log.handlers):
                st_log.addHandler(file_handler)


def get_logger(name):
    """
    Get a logger instance for a specific module.

    Args:
        name: The name of the logger (typically __name__)

    Returns:
        logging.Logger: Logger instance for the specified module
    """
    return logging.getLogger(name)
