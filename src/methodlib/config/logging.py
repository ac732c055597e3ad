"""Opt-in log output for the ``methodlib`` logger hierarchy.

methodlib is a library, so it never touches the root logger. Host applications
that already configure logging need nothing from here: catalog and facade
records propagate to their handlers. Scripts that want methodlib's output
without a logging setup of their own call ``configure_logging``.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "methodlib"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Marks handlers installed here so a repeat call replaces rather than stacks them
_OWNED_ATTR = "_methodlib_owned"


def configure_logging(
    *,
    level: int = logging.INFO,
    handler: logging.Handler | None = None,
    propagate: bool = True,
) -> logging.Logger:
    """Set the ``methodlib`` level and attach one handler to it.

    ``handler`` defaults to a stderr stream handler with a terse format. Pass
    ``propagate=False`` when the root logger also writes to the console, or
    every record is printed twice. Returns the configured package logger.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for existing in [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]:
        logger.removeHandler(existing)
        existing.close()

    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    setattr(handler, _OWNED_ATTR, True)
    logger.addHandler(handler)
    logger.propagate = propagate
    return logger
