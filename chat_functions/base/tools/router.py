"""Simple in-process tool invocation router.

This module defines a minimal router that maps tool names to callables and
invokes them, returning a standard ``ToolResultDTO``. ``dispatch`` takes a
``FunctionDescriptor`` produced by a chat completion (directly or via a
streaming assembler) and resolves its arguments before invoking.

Failures never raise out of ``invoke``/``dispatch``; they are reported in
the result envelope with an ``ErrorCode`` value and logged.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..dto.function import FunctionDescriptor
from ..dto.tool_result import ToolResultDTO
from ..errors import ErrorCode, FunctionParseError, classify_exception
from ..logging import LogContext, get_logger, log_event
from ..utils.names import is_valid_function_name

ToolHandler = Callable[[dict], Any]

_logger = get_logger(__name__)


class SimpleToolRouter:
    """A minimal registry-based tool router.

    Contract:
        - Register handlers by name using ``register(name, handler)``.
        - Invoke via ``invoke(name, params)`` or ``dispatch(function)`` and
          receive ``ToolResultDTO``.
        - Handlers receive a single ``dict`` of params and return any value.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, ToolHandler] = {}
        self._specs: Dict[str, FunctionDescriptor] = {}

    def register(
        self,
        name: str,
        handler: ToolHandler,
        *,
        description: Optional[str] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Register a tool handler under ``name``.

        Args:
            name: Unique tool name; must satisfy ``is_valid_function_name``.
            handler: Callable that accepts a dict of params and returns a value.
            description: Optional description advertised to the model.
            parameters: Optional JSON Schema advertised to the model.

        Raises:
            ValueError: If ``name`` is not an acceptable function name.
        """
        if not is_valid_function_name(name):
            raise ValueError(f"invalid function name {name!r}: use letters, digits, '_' or '-' (max 64 chars)")
        self._handlers[name] = handler
        self._specs[name] = FunctionDescriptor(name, description, parameters=parameters)

    def tool_specs(self) -> List[FunctionDescriptor]:
        """Return descriptors for every registered tool, in registration order."""
        return list(self._specs.values())

    def invoke(self, name: str, params: dict | None = None) -> ToolResultDTO:
        """Invoke a registered tool handler and wrap the result.

        Args:
            name: Tool name to invoke.
            params: Optional dict of parameters passed to the handler.

        Returns:
            ToolResultDTO: Standardized result envelope.
        """
        params = params or {}
        ctx = LogContext(function=name)
        handler = self._handlers.get(name)
        if handler is None:
            log_event(_logger, "tool.error", ctx, level=logging.WARNING, code=ErrorCode.NOT_FOUND.value)
            return ToolResultDTO(
                name=name, ok=False, code=ErrorCode.NOT_FOUND.value, error=f"tool '{name}' not registered"
            )
        log_event(_logger, "tool.dispatch", ctx, params=sorted(params))
        try:
            result = handler(params)
        except Exception as e:
            code = classify_exception(e)
            log_event(_logger, "tool.error", ctx, level=logging.WARNING, code=code.value, error=str(e))
            return ToolResultDTO(name=name, ok=False, code=code.value, error=str(e))
        # Normalize result to str or dict when possible
        content = result if isinstance(result, (str, dict)) else str(result)
        return ToolResultDTO(name=name, ok=True, content=content)

    def dispatch(self, function: FunctionDescriptor, *, tool_call_id: Optional[str] = None) -> ToolResultDTO:
        """Resolve ``function.arguments`` and invoke the matching handler.

        ``None`` arguments become ``{}``. Arguments that are not valid JSON, or
        that decode to something other than an object, produce an ``ok=False``
        result with code ``validation``.
        """
        name = function.name or ""
        ctx = LogContext(function=name, tool_call_id=tool_call_id)
        try:
            arguments = function.arguments
        except FunctionParseError as e:
            log_event(_logger, "tool.error", ctx, level=logging.WARNING, code=e.code.value, error=e.message)
            return self._with_call_id(
                ToolResultDTO(name=name, ok=False, code=e.code.value, error=e.message), tool_call_id
            )
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            error = f"arguments must be a JSON object, got {type(arguments).__name__}"
            log_event(_logger, "tool.error", ctx, level=logging.WARNING, code=ErrorCode.VALIDATION.value, error=error)
            return self._with_call_id(
                ToolResultDTO(name=name, ok=False, code=ErrorCode.VALIDATION.value, error=error), tool_call_id
            )
        return self._with_call_id(self.invoke(name, dict(arguments)), tool_call_id)

    @staticmethod
    def _with_call_id(result: ToolResultDTO, tool_call_id: Optional[str]) -> ToolResultDTO:
        if tool_call_id:
            result.metadata["tool_call_id"] = tool_call_id
        return result


__all__ = ["SimpleToolRouter", "ToolHandler"]
