"""OpenAI-specific Protocol exports (grouped namespace)."""

from __future__ import annotations

from .openai_choice import OpenAIChoice
from .openai_choice_delta import OpenAIChoiceDelta
from .openai_function_delta import OpenAIFunctionDelta
from .openai_stream_chunk import OpenAIStreamChunk
from .openai_tool_call_delta import OpenAIToolCallDelta

__all__ = [
    "OpenAIChoice",
    "OpenAIChoiceDelta",
    "OpenAIFunctionDelta",
    "OpenAIStreamChunk",
    "OpenAIToolCallDelta",
]
