"""Protocol for a choice entry inside a streamed completion chunk."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from .openai_choice_delta import OpenAIChoiceDelta


@runtime_checkable
class OpenAIChoice(Protocol):
    """One choice of a streamed chunk.

    ``delta`` may be absent on the final chunk, where only ``finish_reason``
    (``"tool_calls"`` once every call has been streamed) is set.
    """

    index: int
    delta: Optional[OpenAIChoiceDelta]
    finish_reason: Optional[str]
