"""
Logging setup for the API process.

Modules log through `get_logger(__name__)`. Nothing is printed until
`configure_logging()` runs, which `create_app()` does with the level from
settings, so importing the package never touches the root logger.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks the handler we install so repeated app builds (tests, reloads) reuse it
_HANDLER_NAME = "school_api.console"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach one stdout handler to the root logger and set its level.

    Args:
        level: Level name such as "DEBUG" or "info".

    Returns:
        The root logger.
    """
    root = logging.getLogger()
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
