"""chat_functions: function-calling descriptors for chat-completion APIs.

The package centers on :class:`FunctionDescriptor`, a record describing a
callable function (name, description, JSON-schema parameters, call
arguments) that can be built directly or reassembled from streamed deltas.
"""

from .base import (
    FunctionCallAssembler,
    FunctionDescriptor,
    FunctionError,
    FunctionParseError,
    SimpleToolRouter,
    function_from_delta,
)

__all__ = [
    "FunctionDescriptor",
    "function_from_delta",
    "FunctionCallAssembler",
    "SimpleToolRouter",
    "FunctionError",
    "FunctionParseError",
]
