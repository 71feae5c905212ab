"""Structural SDK shapes consumed by descriptors and the stream assembler.

Stable import path for the Protocols kept under ``base.stubs_parts``.
"""

from .stubs_parts.openai import (
    OpenAIChoice,
    OpenAIChoiceDelta,
    OpenAIFunctionDelta,
    OpenAIStreamChunk,
    OpenAIToolCallDelta,
)

__all__ = [
    "OpenAIChoice",
    "OpenAIChoiceDelta",
    "OpenAIFunctionDelta",
    "OpenAIStreamChunk",
    "OpenAIToolCallDelta",
]
