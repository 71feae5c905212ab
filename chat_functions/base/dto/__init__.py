"""DTOs for function descriptions, wire payloads and tool results."""

from .function import FunctionDescriptor, function_from_delta
from .function_spec import FunctionSpecDTO
from .tool_result import ToolResultDTO

__all__ = [
    "FunctionDescriptor",
    "function_from_delta",
    "FunctionSpecDTO",
    "ToolResultDTO",
]
