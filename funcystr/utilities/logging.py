"""Logging setup for the funcystr logger hierarchy."""

import logging

from funcystr.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a stream handler to the 'funcystr' logger.

    Safe to call more than once; the handler is only added the first time,
    later calls just update the level.

    Args:
        level: Level name (e.g. 'DEBUG'). Defaults to FUNCYSTR_LOG_LEVEL.

    Returns:
        The configured 'funcystr' logger.
    """
    global _configured

    root = logging.getLogger("funcystr")
    root.setLevel((level or get_log_level()).upper())

    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        _configured = True

    return root
