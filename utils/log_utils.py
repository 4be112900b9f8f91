# utils/log_utils.py

"""Logging setup for the command line tool."""
import logging
import sys

LOG_FORMAT = "%(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s %(name)s] %(message)s"

_installed_handler = None


def configure_logging(level="WARNING", stream=None) -> logging.Handler:
    """Attaches a single stderr handler to the root logger; repeated calls replace it."""
    global _installed_handler

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(DEBUG_LOG_FORMAT if level <= logging.DEBUG else LOG_FORMAT))

    root = logging.getLogger()
    if _installed_handler is not None:
        root.removeHandler(_installed_handler)
    _installed_handler = handler
    root.addHandler(handler)
    root.setLevel(level)
    return handler
