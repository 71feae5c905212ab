"""OpenAI tool call delta protocol for streaming chunks."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from .openai_function_delta import OpenAIFunctionDelta


@runtime_checkable
class OpenAIToolCallDelta(Protocol):
    """Protocol for a single tool call entry within a streaming delta.

    ``index`` identifies the call across chunks; ``id`` usually arrives only
    on the first chunk of a call.
    """

    index: int
    id: Optional[str]
    function: Optional[OpenAIFunctionDelta]
