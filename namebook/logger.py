"""
namebook/logger.py
------------------
Every module logs through ``get_logger(__name__)``.

Output goes to stdout unless the host process (uvicorn with --log-config,
pytest, ...) already put handlers on the root logger, in which case those
are reused and only the level is applied.
"""

import logging
import sys

from namebook.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    global _configured
    if _configured:
        return
    # basicConfig is a no-op when the root logger already has handlers
    logging.basicConfig(stream=sys.stdout, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger("namebook").setLevel(level.upper())
    _configured = True


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
