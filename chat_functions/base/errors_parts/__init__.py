"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `chat_functions.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .function_error import FunctionError, FunctionParseError
from .classification import classify_exception

__all__ = ["ErrorCode", "FunctionError", "FunctionParseError", "classify_exception"]
