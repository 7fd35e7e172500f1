# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging
import logging.config

app_logger = logging.getLogger("distroindex")

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logger(level: str, format: str = DEFAULT_FORMAT, stream: str = "ext://sys.stderr"):
    # NOTE According to <https://clig.dev/#the-basics>,
    #      all logging should go to stderr.
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "message_only": {
                "format": format
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "message_only",
                "stream": stream
            },
        },
        "loggers": {
            "distroindex": {
                "level": level.upper(),
                "propagate": True
            }
        },
        "root": {
            "handlers": ["stderr"],
            "level": "ERROR",
        },
    }
    logging.config.dictConfig(logging_config)


def get_child_logger(suffix):
    return app_logger.getChild(suffix)
