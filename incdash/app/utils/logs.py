"""Logging utilities for the dashboard."""
import logging
import sys


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger of the app. When the root logger already has handlers only its level is updated.

    Parameters
    ----------
    level : str
        the logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns
    -------
    None
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.setLevel(level.upper())
        return

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, handlers=[logging.StreamHandler(sys.stdout)])


def get_logger(name: str) -> logging.Logger:
    """return a logger for the given module name, configuring logging on first use"""
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
