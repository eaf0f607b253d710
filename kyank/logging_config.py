"""
Logging configuration for the kyank command.

Diagnostics always go to stderr; stdout carries only the formatted lines.
"""

import logging
import logging.config
from typing import Any, Dict

# Chatty third-party loggers that stay quiet unless DEBUG is requested
NOISY_LOGGERS = ("kubernetes", "urllib3")


def get_logging_config(level: str = "WARNING") -> Dict[str, Any]:
    """Get logging configuration for the given kyank log level."""
    level = level.upper()
    noisy_level = "DEBUG" if level == "DEBUG" else "WARNING"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {
            "kyank": {
                "handlers": ["default"],
                "level": level,
                "propagate": False,
            },
            **{
                name: {"handlers": ["default"], "level": noisy_level, "propagate": False}
                for name in NOISY_LOGGERS
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"],
        },
    }


def configure_logging(level: str = "WARNING") -> None:
    logging.config.dictConfig(get_logging_config(level))
