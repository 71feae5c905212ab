"""
Normalized function error codes (taxonomy).

Defines the `ErrorCode` enumeration used by descriptors, the tool router and
structured logging. Values are lowercase snake_case and are considered a
stable public contract for logs and ``ToolResultDTO.code``.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    EXCEPTION = "exception"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
