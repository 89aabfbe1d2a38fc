from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("agent_docs_mcp")


def configure_logging(level: str = "INFO") -> None:
    """
    Attach a single stderr handler to the package logger.

    stdout is reserved for the stdio transport, so nothing may log there.
    """
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(h)

    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        logger.warning("unknown log level %r, falling back to INFO", level)
        resolved = logging.INFO
    logger.setLevel(resolved)
