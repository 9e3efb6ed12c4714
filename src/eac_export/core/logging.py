#!/usr/bin/env python3
"""
Logging setup for the export service.

Records are written to stdout as JSON by default. Mappers attach the agent
being exported as ``extra={"agent_uri": ...}`` so every line of one export can
be correlated.
"""

import logging
import logging.config
from pythonjsonlogger import jsonlogger

JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s %(agent_uri)s"
PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def build_logging_config(level: str = "INFO", json_output: bool = True) -> dict:
    """Build the dictConfig mapping for the service.

    Args:
        level: Level for the eac_export loggers
        json_output: Use the JSON formatter; plain text otherwise

    Returns:
        Configuration suitable for logging.config.dictConfig
    """
    formatter = "json" if json_output else "plain"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": jsonlogger.JsonFormatter,
                "format": JSON_FORMAT
            },
            "plain": {
                "format": PLAIN_FORMAT
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": "ext://sys.stdout"
            }
        },
        "loggers": {
            "eac_export": {
                "handlers": ["console"],
                "level": level.upper(),
                "propagate": False
            },
            "uvicorn": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": False
            }
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING"
        }
    }


def setup_logging(level: str = "INFO", json_output: bool = True):
    """Setup logging configuration (JSON unless json_output is False)"""
    logging.config.dictConfig(build_logging_config(level, json_output))
