"""Assemble streamed tool-call deltas into ``FunctionDescriptor`` objects.

OpenAI-style chat streams deliver each tool call as a series of deltas
sharing an ``index``. The first delta usually carries the call ``id`` and
function ``name``; later deltas carry fragments of the ``arguments`` text.

- One descriptor is kept per tool-call index and merged in arrival order.
- The first non-blank ``id`` seen for an index is kept.
- Chunks without tool calls (plain content, role-only, usage) are ignored.
- Arguments are never parsed here; reading ``FunctionDescriptor.arguments``
  once the stream has finished does that lazily.

Attribute access is attempted first; dict-like access is tolerated.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from ..dto.function import FunctionDescriptor, function_from_delta
from ..logging import LogContext, get_logger, log_event
from ..stubs_parts.openai import OpenAIStreamChunk, OpenAIToolCallDelta
from ..utils.fields import read_field

_logger = get_logger(__name__)


class FunctionCallAssembler:
    """Buffers tool-call deltas per index until the stream completes.

    Not thread-safe: feed chunks from a single stream reader in order.
    """

    def __init__(self) -> None:
        self._functions: Dict[int, FunctionDescriptor] = {}
        self._ids: Dict[int, str] = {}

    def feed(self, chunk: Union[OpenAIStreamChunk, Mapping[str, Any]]) -> List[int]:
        """Merge every tool-call delta in ``chunk``.

        Returns
        -------
        List[int]
            Indexes touched by this chunk, in the order they appeared.
        """
        choices = read_field(chunk, "choices")
        if not choices:
            return []
        delta = read_field(choices[0], "delta")
        if delta is None:
            return []
        tool_calls = read_field(delta, "tool_calls") or []
        return [self.feed_tool_call(call) for call in tool_calls]

    def feed_tool_call(self, call: Union[OpenAIToolCallDelta, Mapping[str, Any]]) -> int:
        """Merge a single tool-call delta and return its index.

        A missing ``index`` is treated as ``0``, which is what providers
        streaming a single call without indexes expect.
        """
        index = read_field(call, "index")
        index = 0 if index is None else int(index)

        call_id = read_field(call, "id")
        if call_id and str(call_id).strip() and index not in self._ids:
            self._ids[index] = str(call_id)

        fn = read_field(call, "function")
        existing = self._functions.get(index)
        if existing is None:
            self._functions[index] = function_from_delta(fn)
            log_event(
                _logger,
                "stream.call_started",
                LogContext(function=self._functions[index].name, tool_call_id=self._ids.get(index), index=index),
                level=logging.DEBUG,
            )
        else:
            existing.merge_delta(fn)
        return index

    def get(self, index: int) -> Optional[FunctionDescriptor]:
        """Return the descriptor assembled for ``index``, if any."""
        return self._functions.get(index)

    def functions(self) -> List[FunctionDescriptor]:
        """Return assembled descriptors ordered by tool-call index."""
        return [self._functions[i] for i in sorted(self._functions)]

    def ids(self) -> Dict[int, str]:
        """Return the call ids recorded per index."""
        return dict(self._ids)

    def finalize(self) -> List[FunctionDescriptor]:
        """Return the assembled descriptors and log the stream summary.

        Arguments are not parsed here; a malformed call only fails when its
        ``arguments`` are read.
        """
        functions = self.functions()
        log_event(
            _logger,
            "stream.finalized",
            level=logging.DEBUG,
            calls=len(functions),
            names=[fn.name for fn in functions],
        )
        return functions

    def reset(self) -> None:
        """Discard all accumulated state."""
        self._functions.clear()
        self._ids.clear()

    def __len__(self) -> int:
        return len(self._functions)


__all__ = ["FunctionCallAssembler"]
