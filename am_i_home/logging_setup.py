"""Logging configuration for am-i-home.

Log lines go to stderr so stdout stays clean for the device table and
the ``true``/``false`` answer of ``check``.
"""

import logging
import sys

import colorlog

log = logging.getLogger("am-i-home")

LOG_FORMAT = "%(log_color)s%(levelname).1s%(reset)s %(name)s: %(message)s"
DEBUG_LOG_FORMAT = (
    "%(log_color)s%(levelname).1s%(reset)s %(asctime)s.%(msecs)03d "
    "%(name)s %(module)s:%(lineno)d: %(message)s"
)
LOG_COLORS = {
    "DEBUG":    "white",
    "INFO":     "blue",
    "WARNING":  "yellow",
    "ERROR":    "bold_red",
    "CRITICAL": "bold_red,bg_white",
}


def setup_logging(debug: bool = False) -> None:
    """
    Configure the package logger.

    Args:
        debug: Enable debug-level logging with timestamps and source lines
    """
    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.handlers.clear()
    log.propagate = False

    handler = colorlog.StreamHandler(sys.stderr)
    handler.setFormatter(colorlog.ColoredFormatter(
        DEBUG_LOG_FORMAT if debug else LOG_FORMAT,
        datefmt="%H:%M:%S",
        log_colors=LOG_COLORS,
    ))
    log.addHandler(handler)
