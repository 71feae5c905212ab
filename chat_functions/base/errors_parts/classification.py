"""
Error classification helpers mapping exceptions to normalized ErrorCode values.
"""
from __future__ import annotations

import json

from pydantic import ValidationError

from .error_code import ErrorCode
from .function_error import FunctionError


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. FunctionError passthrough.
        2. JSON decoding and pydantic validation failures.
        3. ``EXCEPTION`` for anything else raised by user code.
    """
    if isinstance(exc, FunctionError):
        return exc.code
    if isinstance(exc, (json.JSONDecodeError, ValidationError)):
        return ErrorCode.VALIDATION
    return ErrorCode.EXCEPTION


__all__ = ["classify_exception"]
