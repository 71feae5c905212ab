"""
Structured function error exception types.

``FunctionError`` carries a normalized `ErrorCode` for consistent handling and
structured logging. ``FunctionParseError`` is raised when the accumulated
JSON text of a descriptor field cannot be decoded at read time.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class FunctionError(Exception):
    """Represents a structured function error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        function: Function name involved, when known.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    function: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining function, code, and message."""
        return f"{self.function or '-'} {self.code.value}: {self.message}"


@dataclass(eq=False)
class FunctionParseError(FunctionError, ValueError):
    """Accumulated ``parameters``/``arguments`` text is not valid JSON.

    Raised at read time only; merging deltas never validates. ``field`` names
    the descriptor field and ``text`` holds the text that failed to decode.
    """

    field: str = ""
    text: str = ""


__all__ = ["FunctionError", "FunctionParseError"]
