"""
chat_functions base package

Exports the function descriptor, its wire DTO, the streaming assembler, the
tool router, and the error taxonomy.
"""

from .dto import FunctionDescriptor, FunctionSpecDTO, ToolResultDTO, function_from_delta
from .errors import ErrorCode, FunctionError, FunctionParseError, classify_exception
from .streaming import FunctionCallAssembler
from .stubs import OpenAIFunctionDelta, OpenAIStreamChunk, OpenAIToolCallDelta
from .tools import SimpleToolRouter, ToolHandler
from .utils import is_valid_function_name

__all__ = [
    # DTOs
    "FunctionDescriptor",
    "function_from_delta",
    "FunctionSpecDTO",
    "ToolResultDTO",
    # Errors
    "ErrorCode",
    "FunctionError",
    "FunctionParseError",
    "classify_exception",
    # Streaming / dispatch
    "FunctionCallAssembler",
    "SimpleToolRouter",
    "ToolHandler",
    "is_valid_function_name",
    # SDK shapes
    "OpenAIFunctionDelta",
    "OpenAIToolCallDelta",
    "OpenAIStreamChunk",
]
