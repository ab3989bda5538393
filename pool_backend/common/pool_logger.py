import logging
import sys

from pool_backend.common.config import config

LOGGER_NAME = "pool_backend"
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
LOG_ENTRY_FORMAT = '%(asctime)s %(levelname)s\t[%(threadName)s] (%(filename)s:%(funcName)s:%(lineno)d) - %(message)s'


def get_logger():
    """
    Returns the logger shared by all pool backend modules.
    Entries go to stderr, stdout carries command results only.
    The thread name is the pool or volume being processed.
    """
    pool_logger = logging.getLogger(LOGGER_NAME)

    if not pool_logger.handlers:
        pool_logger.setLevel(config.logging.level.upper())
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_ENTRY_FORMAT))
        pool_logger.addHandler(handler)
        pool_logger.propagate = False

    return pool_logger


def set_log_level(log_level):
    """
    Overrides the configured log level. Empty values keep it.

    Raises:
        ValueError : log_level is not one of LOG_LEVELS
    """
    if not log_level:
        return
    if log_level.lower() not in LOG_LEVELS:
        raise ValueError("unknown log level : {0}".format(log_level))
    get_logger().setLevel(log_level.upper())
