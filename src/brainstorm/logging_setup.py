"""Central logging configuration for the application.

Applies a root stdout handler so every module logger emits without per-module
setup. Keeps uvicorn loggers on the same handler and avoids duplicate
handlers on reloads.
"""

from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Any


def _dict_config(level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            "uvicorn": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": level, "handlers": ["console"], "propagate": False},
        },
    }


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging once.

    If the root logger already has handlers, only apply the level and keep
    the existing handlers, to prevent duplicate output (reloaders, test
    runners that install their own capture handlers).
    """
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level.upper())
        return
    dictConfig(_dict_config(level.upper()))
