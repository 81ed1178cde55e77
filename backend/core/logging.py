"""Logging setup shared by the API process and migrations."""

from __future__ import annotations

import logging
from logging.config import dictConfig

_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        }
    },
    "loggers": {
        "uvicorn": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "uvicorn.error": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "uvicorn.access": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "waitlist": {"handlers": ["console"], "propagate": False},
    },
}


def configure_logging(level: str = "INFO") -> None:
    config = {**_LOGGING_CONFIG, "loggers": {**_LOGGING_CONFIG["loggers"]}}
    config["loggers"]["waitlist"] = {**config["loggers"]["waitlist"], "level": level.upper()}
    config["root"] = {"level": level.upper(), "handlers": ["console"]}
    dictConfig(config)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the ``waitlist`` namespace."""
    return logging.getLogger(f"waitlist.{name}" if name else "waitlist")
