"""Structural Protocols describing the SDK shapes consumed by this package."""

from .openai import (
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
