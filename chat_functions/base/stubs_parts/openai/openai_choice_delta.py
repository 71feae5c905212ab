"""Protocol for the incremental message carried by a streamed choice.

Only ``tool_calls`` matters to function assembly; ``content`` is listed
because text and tool calls share the same delta object.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from .openai_tool_call_delta import OpenAIToolCallDelta


@runtime_checkable
class OpenAIChoiceDelta(Protocol):
    """Incremental assistant message for one choice.

    Attributes:
        content: Text emitted in this chunk, if any.
        tool_calls: Tool-call fragments emitted in this chunk, if any.
    """

    content: Optional[str]
    tool_calls: Optional[Sequence[OpenAIToolCallDelta]]
