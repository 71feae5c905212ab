"""Base structured logging utilities for chat_functions.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid sprinkling ad-hoc logger setup across modules.

Every module obtains a child of the shared ``chat_functions`` logger via
``get_logger(__name__)``; only the shared logger owns a console handler.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Any

from ..config.defaults import LOGGER_NAME
from ..config.env import get_json_logging, get_log_level, parse_level
from .log_support import JsonFormatter, LogContext


_BASE_LOGGER_ATTR = "_chat_functions_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_chat_functions_console_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger() -> logging.Logger:
    """Initialize and return the shared package logger."""

    logger = logging.getLogger(LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger

    logger.setLevel(get_log_level())
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_make_formatter(get_json_logging()))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [h for h in logger.handlers if not getattr(h, _CONSOLE_HANDLER_ATTR, False)]
    logger.addHandler(handler)
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return ``name`` as a logger that propagates to the shared package logger."""
    base_logger = _ensure_base_logger()
    if name == LOGGER_NAME:
        return base_logger
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger


def configure_logger(*, level: int | str | None = None, json_mode: bool | None = None) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Numeric level or level name. ``None`` keeps the current level.
    json_mode: bool | None
        Switch managed console handlers between JSON and plain formatting.
        ``None`` keeps the current formatter.
    """
    logger = _ensure_base_logger()
    if level is not None:
        if isinstance(level, str):
            logger.setLevel(parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)
    if json_mode is not None:
        for h in logger.handlers:
            if getattr(h, _CONSOLE_HANDLER_ATTR, False):
                h.setFormatter(_make_formatter(json_mode))
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON message.

    ``None`` valued fields are dropped to keep payloads concise.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (usually from ``get_logger``).
    event: str
        Event name (e.g. ``tool.dispatch``).
    ctx: LogContext | None
        Function/tool-call context; merged shallowly.
    level: int
        Logging level for the record.
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
