"""Logging configuration for applications embedding the simulator.

Library modules only create ``logging.getLogger(__name__)`` loggers and never
install handlers; call :func:`configure_logging` once from an entry point.
"""

import logging

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO, fmt: str = DEFAULT_FORMAT) -> None:
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=fmt)
    logging.getLogger("toy_robot").setLevel(level)
