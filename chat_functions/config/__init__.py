"""Configuration defaults and environment helpers for chat_functions."""

from .defaults import (
    DEFAULT_LOG_LEVEL,
    FUNCTION_NAME_MAX_LENGTH,
    FUNCTION_NAME_PATTERN,
    LOG_JSON_DEFAULT,
    LOGGER_NAME,
)
from .env import LOG_JSON_ENV, LOG_LEVEL_ENV, get_json_logging, get_log_level

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "FUNCTION_NAME_MAX_LENGTH",
    "FUNCTION_NAME_PATTERN",
    "LOG_JSON_DEFAULT",
    "LOGGER_NAME",
    "LOG_JSON_ENV",
    "LOG_LEVEL_ENV",
    "get_json_logging",
    "get_log_level",
]
