"""Logging setup for applications using route_template."""

import logging
import sys

FORMAT_STRING = "[%(name)s] - [%(levelname)s] - %(message)s"


def _already_configured(log: logging.Logger) -> bool:
    if not log.handlers:
        return False

    for handler in log.handlers:
        if isinstance(handler, logging.StreamHandler):
            if handler.stream == sys.stdout:
                return True

    return False


def configure_logging(
    debug: bool = False, name: str = "route_template"
) -> logging.Logger:
    """Send the package logs to stdout at DEBUG or ERROR level."""
    log = logging.getLogger(name)
    if debug:
        level = logging.DEBUG
    else:
        level = logging.ERROR
    log.setLevel(level)

    if _already_configured(log):
        return log

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMAT_STRING))
    log.propagate = False
    log.addHandler(handler)
    return log
