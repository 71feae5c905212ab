"""chat_functions.config.env
=========================

Environment variable lookups for package-wide settings.

Environment Variable Conventions
--------------------------------
- ``CHAT_FUNCTIONS_LOG_LEVEL``: DEBUG, INFO, WARNING, ERROR or CRITICAL.
- ``CHAT_FUNCTIONS_LOG_JSON``: truthy/falsy toggle for the JSON formatter.

Failure Modes
-------------
Helpers never raise on unset or unrecognized values; they fall back to the
constants in ``chat_functions.config.defaults``.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .defaults import DEFAULT_LOG_LEVEL, LOG_JSON_DEFAULT

LOG_LEVEL_ENV = "CHAT_FUNCTIONS_LOG_LEVEL"
LOG_JSON_ENV = "CHAT_FUNCTIONS_LOG_JSON"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def parse_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Parse a logging level name into its integer constant.

    Accepts common names case-insensitively and falls back to ``default``
    on unknown or empty values.
    """
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def get_log_level() -> int:
    """Return the configured log level for the shared package logger."""
    return parse_level(os.getenv(LOG_LEVEL_ENV), default=parse_level(DEFAULT_LOG_LEVEL))


def get_json_logging() -> bool:
    """Return whether structured JSON logging is enabled.

    Unrecognized values keep the default rather than raising.
    """
    raw = os.getenv(LOG_JSON_ENV)
    if raw is None:
        return LOG_JSON_DEFAULT
    v = raw.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    return LOG_JSON_DEFAULT


__all__ = [
    "LOG_LEVEL_ENV",
    "LOG_JSON_ENV",
    "parse_level",
    "get_log_level",
    "get_json_logging",
]
