"""Protocol for one chunk of a streamed chat completion.

``FunctionCallAssembler.feed`` accepts objects of this shape (SDK chunk
models) as well as the equivalent decoded JSON mapping.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from .openai_choice import OpenAIChoice


@runtime_checkable
class OpenAIStreamChunk(Protocol):
    """A streamed completion chunk carrying tool-call deltas.

    Attributes:
        id: Completion id shared by every chunk of one response.
        choices: Choice entries; the assembler reads tool calls from the
            first one only. May be empty on usage-only chunks.
    """

    id: Optional[str]
    choices: Sequence[OpenAIChoice]
