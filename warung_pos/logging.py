"""
Logging for the register.

The root logger is configured once on import; modules then ask for a named
logger:

    from warung_pos.logging import get_logger
    logger = get_logger(__name__)
    logger.info("Checkout committed")

Values that come from the cashier or the catalog (identities, product
names) go through the sanitizers before they reach a log line.
"""

import logging
import os
import sys
from functools import cache

_DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_COMPACT_FORMAT = "%(levelname)s - %(name)s - %(message)s"

# Chatty transport loggers underneath the Supabase client
_QUIET_LOGGERS = ("httpx", "httpcore", "hpack")


def _log_level() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _configure_root_logger() -> None:
    """Attach a stdout handler unless the host app already configured logging."""
    root = logging.getLogger()
    if root.handlers:
        return

    level = _log_level()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    # Compact lines on the shop's register, timestamps during development
    compact = os.environ.get("POS_ENV") == "production"
    handler.setFormatter(logging.Formatter(_COMPACT_FORMAT if compact else _DETAILED_FORMAT))
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """Named logger (typically ``__name__``)."""
    return logging.getLogger(name)


def _strip_control_chars(value: str) -> str:
    # Log injection (CWE-117): keep each record on one line
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: str | int | None, max_length: int = 16) -> str:
    """Line identity or catalog id, escaped and cut to ``max_length``. "N/A" when empty."""
    if id_value is None or id_value == "":
        return "N/A"
    return _strip_control_chars(str(id_value))[:max_length]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Free text such as product names, escaped for logging.

    Longer values are cut to ``max_length`` and marked with "...".
    Returns "N/A" for None or empty values.
    """
    if not value:
        return "N/A"
    safe_value = _strip_control_chars(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
