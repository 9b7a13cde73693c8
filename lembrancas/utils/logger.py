"""
Logging configuration for the Lembrancas API.

All modules log through ``logging.getLogger(__name__)``; their records
propagate to the ``lembrancas`` package logger configured here.
"""

import logging
from logging.handlers import RotatingFileHandler


LOGGER_NAME = "lembrancas"


def setup_logger(
    config_loader,
    log_to_file: bool = False,
    file_name: str = "api.log"
) -> logging.Logger:
    """
    Set up and configure the package logger.

    Args:
        config_loader: Configuration loader with get_log_level() method
        log_to_file: If True, log to a rotating file; otherwise to console
        file_name: Log file path (used when log_to_file is True)

    Returns:
        Configured Logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config_loader.get_log_level())

    # Clear any existing handlers to avoid duplicate logs
    if logger.hasHandlers():
        logger.handlers.clear()

    if log_to_file:
        handler = RotatingFileHandler(
            file_name,
            maxBytes=5 * 1024 * 1024,  # 5 MB per file
            backupCount=3
        )
    else:
        handler = logging.StreamHandler()

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
