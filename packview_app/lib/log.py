# packview_app/lib/log.py
from __future__ import annotations
import logging
from logging.config import dictConfig

LOGGER_NAME = "packview"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Configure the ``packview`` logger tree once per process."""
    global _configured
    if _configured:
        logging.getLogger(LOGGER_NAME).setLevel(level)
        return

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                LOGGER_NAME: {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": False,
                },
            },
        }
    )
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
