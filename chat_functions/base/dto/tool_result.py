"""Standard tool result DTO returned by tool dispatch.

This DTO defines a minimal shape for tool results so that callers feeding
results back into a conversation can rely on a consistent contract.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field


class ToolResultDTO(BaseModel):
    """Result envelope for a tool invocation.

    Attributes:
        name: The tool name that was invoked.
        ok: True when the tool executed successfully, False otherwise.
        content: Optional result payload (text or JSON-like dict).
        code: Optional ``ErrorCode`` value when ``ok`` is False.
        error: Optional human-readable error string when ``ok`` is False.
        metadata: Free-form metadata for tracing/auditing.
    """

    name: str
    ok: bool
    content: Optional[Union[str, Dict[str, Any]]] = None
    code: Optional[str] = None
    error: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["ToolResultDTO"]
