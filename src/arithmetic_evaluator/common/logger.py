"""Shared logger for the arithmetic evaluator."""
import logging
import sys


LOGGER_NAME: str = "arithmetic_evaluator"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)


def configure_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Set the package log level and attach a stderr handler on first use.

    :param int level: Logging level applied to the logger

    :return: Configured logger
    :rtype: logging.Logger
    """
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
