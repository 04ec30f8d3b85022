"""Logging setup shared by the services, repositories and the Flask app."""

import logging
from typing import Optional, Union

ROOT_LOGGER = "locatecar"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Child logger under the package namespace, e.g. locatecar.RentalService."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger once.
    Calling it again only changes the level.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if not any(getattr(h, "_locatecar", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._locatecar = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    if level is not None:
        if isinstance(level, str):
            level = level.upper()
        logger.setLevel(level)
    return logger
