"""chat_functions.config.defaults
==============================

Central place for small, stable default values used across the package.
Values here can be overridden via environment variables (see
``chat_functions.config.env``) but provide sensible fallbacks for local
development and tests.

This module intentionally avoids importing from other package modules to
prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Function naming ----

# Upper bound on function names accepted by chat-completion APIs.
FUNCTION_NAME_MAX_LENGTH = 64

# Letters, digits, underscores and dashes only.
FUNCTION_NAME_PATTERN = r"^[A-Za-z0-9_-]+$"


# ---- Logging ----

# Root logger shared by every module in the package.
LOGGER_NAME = "chat_functions"

DEFAULT_LOG_LEVEL = "INFO"

# Emit JSON lines unless explicitly disabled.
LOG_JSON_DEFAULT = True


__all__ = [
    "FUNCTION_NAME_MAX_LENGTH",
    "FUNCTION_NAME_PATTERN",
    "LOGGER_NAME",
    "DEFAULT_LOG_LEVEL",
    "LOG_JSON_DEFAULT",
]
