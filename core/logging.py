"""QUOTE API FILE PURPOSE
Purpose: `quote_api` logger plus an always-on `quote_api.startup` child for the startup-time line.
Hot path: yes (request handlers log through `logger`; quiet unless QUOTE_API_DEBUG=1).
Feature flags: QUOTE_API_DEBUG.
Failure mode: never crash due to logging.
"""

from __future__ import annotations

import logging

from core.config import is_debug

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def get_logger(name: str = "quote_api") -> logging.Logger:
    base = logging.getLogger("quote_api")
    if not base.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        base.addHandler(handler)
        base.setLevel(logging.INFO if is_debug() else logging.WARNING)
    return logging.getLogger(name)


logger = get_logger()

# INFO floor regardless of debug; records reach the base handler by propagation.
startup_logger = get_logger("quote_api.startup")
startup_logger.setLevel(logging.INFO)
