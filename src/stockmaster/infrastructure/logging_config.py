"""Console logging for the ``stockmaster`` logger tree.

Kept out of a module called ``logging`` so the package never shadows the
standard library.
"""

from __future__ import annotations

import logging
import sys

import colorlog

LOG_FORMAT = "%(log_color)s%(asctime)s %(levelname)-8s [%(name)s]%(reset)s %(message)s"

LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def configure_logging(level: int = logging.WARNING) -> None:
    """Send ``stockmaster.*`` records to stderr with coloured levels.

    Calling it again replaces the handler instead of stacking another one.
    """
    handler = colorlog.StreamHandler(sys.stderr)
    handler.setFormatter(
        colorlog.ColoredFormatter(LOG_FORMAT, datefmt="%H:%M:%S", log_colors=LEVEL_COLORS)
    )

    logger = logging.getLogger("stockmaster")
    logger.setLevel(level)
    logger.handlers = [handler]
