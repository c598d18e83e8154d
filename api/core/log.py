"""
Logging setup.

Modules log through `logging.getLogger(__name__)` with `key=value` messages;
this only configures the root handler once per process.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # uvicorn's access log duplicates the request-timing middleware.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
