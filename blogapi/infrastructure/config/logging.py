"""Logging configuration for the application."""

import logging.config
from typing import Any


def setup_logging(level: str = "INFO") -> None:
    """Route all loggers through one console handler at the given level."""
    log_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level.upper(),
                "formatter": "default",
            },
        },
        "root": {"level": level.upper(), "handlers": ["console"]},
    }

    logging.config.dictConfig(log_config)
