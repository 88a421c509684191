"""Console logging setup for the application and uvicorn."""
from __future__ import annotations

import logging.config


def setup_logging(log_level: str = "INFO") -> None:
    """Configure root, uvicorn and application loggers to write to stdout."""
    handlers = ["console"]
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "default",
                    "level": log_level,
                },
            },
            "loggers": {
                "": {"handlers": handlers, "level": log_level},
                "uvicorn": {"handlers": handlers, "level": "INFO", "propagate": False},
                "uvicorn.access": {"handlers": handlers, "level": "INFO", "propagate": False},
                "profilehub": {"handlers": handlers, "level": log_level, "propagate": False},
            },
        }
    )
