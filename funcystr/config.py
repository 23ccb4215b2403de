"""Runtime configuration.

Settings are read from environment variables on each call so tests and
long-running processes pick up changes without a restart.
"""

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HTTP_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "funcystr/0.1"


def _env_number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("[CONFIG] Invalid %s=%r, using default %r", name, raw, default)
        return default


def get_max_depth() -> int | None:
    """Maximum nested resolution depth, or None for unbounded.

    FUNCYSTR_MAX_DEPTH unset, empty or 0 means unbounded.
    """
    value = _env_number("FUNCYSTR_MAX_DEPTH", 0, int)
    return value if value > 0 else None


def get_log_level() -> str:
    """Log level name for the funcystr logger hierarchy.

    Unknown names fall back to DEFAULT_LOG_LEVEL with a warning.
    """
    raw = os.environ.get("FUNCYSTR_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = raw.strip().upper()
    if level not in logging.getLevelNamesMapping():
        logger.warning(
            "[CONFIG] Invalid FUNCYSTR_LOG_LEVEL=%r, using default %r", raw, DEFAULT_LOG_LEVEL
        )
        return DEFAULT_LOG_LEVEL
    return level


def get_http_timeout() -> float:
    """Timeout in seconds for remote template functions."""
    return _env_number("FUNCYSTR_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT, float)


def get_user_agent() -> str:
    """User-Agent header sent by remote template functions."""
    return os.environ.get("FUNCYSTR_USER_AGENT", DEFAULT_USER_AGENT)
