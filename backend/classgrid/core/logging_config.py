from __future__ import annotations

import logging

LOGGER_NAME = "classgrid"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stream handler to the package logger; safe to call twice."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(getattr(handler, "_classgrid_handler", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._classgrid_handler = True
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
