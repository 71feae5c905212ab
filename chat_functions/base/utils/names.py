"""Function name validation.

Chat-completion APIs accept function names made of letters, digits,
underscores and dashes, up to 64 characters. ``FunctionDescriptor`` does not
enforce this; callers that register or advertise functions do.
"""
from __future__ import annotations

import re
from typing import Optional

from ...config.defaults import FUNCTION_NAME_MAX_LENGTH, FUNCTION_NAME_PATTERN

_NAME_RE = re.compile(FUNCTION_NAME_PATTERN)


def is_valid_function_name(name: Optional[str]) -> bool:
    """Return True when ``name`` is a non-empty, API-acceptable function name."""
    if not name or len(name) > FUNCTION_NAME_MAX_LENGTH:
        return False
    return _NAME_RE.fullmatch(name) is not None


__all__ = ["is_valid_function_name"]
