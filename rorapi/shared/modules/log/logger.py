"""
Shared logging setup.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level="INFO"):
    """
    Send records to stdout with one format and set the root level.

    A handler is only added when the root logger has none, so a WSGI server
    or test runner that already configured logging keeps its handlers.

    Args:
        level: Level name or number for the root logger.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stdout)
    logging.getLogger().setLevel(level)


def get_logger(name):
    return logging.getLogger(name)
