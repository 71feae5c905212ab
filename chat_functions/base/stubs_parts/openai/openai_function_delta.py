"""OpenAI function delta protocol.

Defines the structural contract for the function fragment carried by a
streaming tool-call delta, as consumed by ``FunctionDescriptor.merge_delta``.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class OpenAIFunctionDelta(Protocol):
    """Protocol for a streamed function fragment.

    Attributes
    ----------
    name: Optional[str]
        The function name when present in this chunk.
    description: Optional[str]
        The function description when present in this chunk.
    arguments: Optional[str]
        A fragment of the JSON arguments text. Only the concatenation of
        every fragment is expected to be valid JSON.
    parameters: Optional[str]
        A fragment of the JSON Schema text, following the same rule.
    """

    name: Optional[str]
    description: Optional[str]
    arguments: Optional[str]
    parameters: Optional[str]
