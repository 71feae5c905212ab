"""Function error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``chat_functions.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.function_error import FunctionError, FunctionParseError
from .errors_parts.classification import classify_exception

__all__ = ["ErrorCode", "FunctionError", "FunctionParseError", "classify_exception"]
