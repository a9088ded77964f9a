"""
Logging setup for the kosync service.

Modules log through ``logging.getLogger(__name__)``; this only installs the
root handler and level once at startup. Uvicorn keeps its own loggers.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO") -> None:
    """
    Install a stream handler on the root logger and set the level.

    Safe to call more than once; later calls only update the level.
    """
    global _handler

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
    root.setLevel(numeric_level)
