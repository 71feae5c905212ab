"""Function descriptor used by chat-completion function calling.

A :class:`FunctionDescriptor` carries a function's name, optional
description, JSON-schema ``parameters`` and call-time ``arguments``. It is
either built in one shot from final values or assembled in place from a
sequence of streamed deltas.

Streaming notes
---------------
- ``name``/``description`` fragments replace the current value when non-blank.
- ``parameters``/``arguments`` fragments are appended to accumulated text.
  Byte fragments are decoded incrementally, so a UTF-8 sequence may be split
  across chunks.
- JSON text is parsed lazily on first read and memoized until the next
  append. Intermediate states are expected to be invalid JSON, so merging
  never validates; only a read can raise :class:`FunctionParseError`.
- Failed parses are not memoized; a later read retries against the longer text.

This module performs no I/O beyond a warning log on parse failure.
"""

from __future__ import annotations

import codecs
import json
import logging
from typing import Any, Dict, Mapping, Optional, Union

from ..errors import ErrorCode, FunctionError, FunctionParseError
from ..logging import LogContext, get_logger, log_event
from ..stubs_parts.openai import OpenAIFunctionDelta, OpenAIToolCallDelta
from ..utils.fields import read_field
from .function_spec import FunctionSpecDTO

_logger = get_logger(__name__)

# Marks a JSON field whose text has not been parsed since the last append.
_UNPARSED: Any = object()

FunctionDeltaLike = Union[OpenAIFunctionDelta, OpenAIToolCallDelta, Mapping[str, Any]]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or str(value).strip() == ""


def _encode_fragment(fragment: Any) -> Union[str, bytes]:
    """Return a delta's JSON fragment as text or raw UTF-8 bytes.

    SDKs usually deliver raw string chunks; already-decoded values
    (mappings, lists, numbers) are re-encoded so they can be concatenated.
    """
    if isinstance(fragment, str):
        return fragment
    if isinstance(fragment, (bytes, bytearray)):
        return bytes(fragment)
    return json.dumps(fragment, ensure_ascii=False)


def _unwrap_delta(delta: Optional[FunctionDeltaLike]) -> Any:
    """Return the function fragment carried by ``delta``.

    Tool-call deltas expose the fragment under ``function``; a function
    fragment (or mapping) is returned unchanged.
    """
    inner = read_field(delta, "function")
    return delta if inner is None else inner


class _JsonField:
    """Accumulated JSON text plus its memoized parse."""

    __slots__ = ("text", "value", "_decoder", "_decode_error")

    def __init__(self, value: Any = _UNPARSED) -> None:
        self.text: Optional[str] = None
        self.value: Any = value
        self._decoder: Optional[codecs.IncrementalDecoder] = None
        self._decode_error: Optional[UnicodeDecodeError] = None

    @property
    def present(self) -> bool:
        """True when the field carries a value or non-blank text."""
        if self._decode_error is not None or not _is_blank(self.text):
            return True
        return self.text is None and self.value is not None and self.value is not _UNPARSED

    def _pending_bytes(self) -> bytes:
        return self._decoder.getstate()[0] if self._decoder is not None else b""

    def _decode(self, fragment: bytes, final: bool = False) -> str:
        if self._decoder is None:
            self._decoder = codecs.getincrementaldecoder("utf-8")()
        try:
            return self._decoder.decode(fragment, final=final)
        except UnicodeDecodeError as exc:
            # Bad bytes never become valid; keep the first failure for reads.
            if self._decode_error is None:
                self._decode_error = exc
            self._decoder.reset()
            return ""

    def append(self, fragment: Union[str, bytes]) -> None:
        if isinstance(fragment, bytes):
            piece = self._decode(fragment)
        else:
            piece = self._decode(b"", final=True) + fragment if self._pending_bytes() else fragment
        self.text = (self.text or "") + piece
        self.value = _UNPARSED

    def _fail(self, field: str, function: Optional[str], message: str, exc: Exception) -> FunctionParseError:
        log_event(
            _logger,
            "function.parse_error",
            LogContext(function=function),
            level=logging.WARNING,
            field=field,
            length=len(self.text or ""),
            error=message,
        )
        return FunctionParseError(
            code=ErrorCode.VALIDATION,
            message=f"{field} {message}",
            function=function,
            raw=exc,
            field=field,
            text=self.text or "",
        )

    def resolve(self, field: str, function: Optional[str]) -> Any:
        if self.value is not _UNPARSED:
            return self.value
        if self._decode_error is not None:
            exc = self._decode_error
            raise self._fail(field, function, f"is not valid UTF-8: {exc.reason}", exc) from exc
        pending = self._pending_bytes()
        if pending:
            exc = UnicodeDecodeError("utf-8", pending, 0, len(pending), "unexpected end of data")
            raise self._fail(field, function, "ends inside a UTF-8 sequence", exc) from exc
        if _is_blank(self.text):
            return None
        try:
            self.value = json.loads(self.text)
        except json.JSONDecodeError as exc:
            raise self._fail(
                field, function, f"is not valid JSON: {exc.msg} (line {exc.lineno} column {exc.colno})", exc
            ) from exc
        return self.value


class FunctionDescriptor:
    """A function the model may call, or a call the model has made.

    Parameters
    ----------
    name:
        Required for direct construction. May contain a-z, A-Z, 0-9,
        underscores and dashes, with a maximum length of 64 characters.
        Not enforced here; see ``is_valid_function_name``.
    description:
        Optional description used by the model to decide whether to call
        the function.
    parameters:
        Optional, already-parsed JSON Schema describing the arguments.
    arguments:
        Optional, already-parsed arguments to call the function with.

    Notes
    -----
    Attributes are read-only from outside; the only mutation path is
    :meth:`merge_delta`.
    """

    __slots__ = ("_name", "_description", "_parameters", "_arguments")

    def __init__(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        parameters: Any = None,
        arguments: Any = None,
    ) -> None:
        self._name = name
        self._description = description
        self._parameters = _JsonField(parameters)
        self._arguments = _JsonField(arguments)

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def parameters(self) -> Any:
        """JSON Schema for the function's parameters, parsed on first read.

        Raises
        ------
        FunctionParseError
            When the accumulated parameters text is not valid JSON.
        """
        return self._parameters.resolve("parameters", self._name)

    @property
    def arguments(self) -> Any:
        """Arguments for the call, parsed on first read.

        Raises
        ------
        FunctionParseError
            When the accumulated arguments text is not valid JSON.
        """
        return self._arguments.resolve("arguments", self._name)

    @property
    def parameters_text(self) -> Optional[str]:
        """Raw accumulated parameters text, ``None`` when nothing was merged."""
        return self._parameters.text

    @property
    def arguments_text(self) -> Optional[str]:
        """Raw accumulated arguments text, ``None`` when nothing was merged."""
        return self._arguments.text

    def merge_delta(self, delta: Optional[FunctionDeltaLike]) -> "FunctionDescriptor":
        """Fold one streamed fragment into this descriptor and return ``self``.

        ``delta`` is a function fragment exposing ``name``, ``description``,
        ``parameters`` and ``arguments`` (attribute or mapping access), or a
        tool-call delta carrying such a fragment under ``function``. Missing
        keys are treated as absent.
        """
        fn = _unwrap_delta(delta)
        if fn is None:
            return self

        name = read_field(fn, "name")
        if not _is_blank(name):
            self._name = name

        description = read_field(fn, "description")
        if not _is_blank(description):
            self._description = description

        arguments = read_field(fn, "arguments")
        if arguments is not None:
            self._arguments.append(_encode_fragment(arguments))

        parameters = read_field(fn, "parameters")
        if parameters is not None:
            self._parameters.append(_encode_fragment(parameters))

        return self

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire representation, omitting absent fields.

        ``arguments`` is emitted as JSON text, as chat-completion APIs send
        it. ``parameters`` is emitted as decoded JSON unless it decoded to a
        string or ``null``, which are emitted as JSON text so that
        :meth:`from_dict` reads them back unchanged.

        Raises
        ------
        FunctionError
            When the descriptor has no name (code ``validation``).
        FunctionParseError
            When a JSON field's accumulated text is not valid JSON.
        """
        if _is_blank(self._name):
            raise FunctionError(
                code=ErrorCode.VALIDATION,
                message="a name is required to serialize a function",
                function=self._name,
            )
        fields: Dict[str, Any] = {"name": self._name}
        if self._description is not None:
            fields["description"] = self._description
        if self._parameters.present:
            parameters = self.parameters
            if parameters is None or isinstance(parameters, str):
                parameters = json.dumps(parameters, ensure_ascii=False)
            fields["parameters"] = parameters
        if self._arguments.present:
            fields["arguments"] = json.dumps(self.arguments, ensure_ascii=False)
        return FunctionSpecDTO(**fields).model_dump(exclude_unset=True)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "FunctionDescriptor":
        """Build a descriptor from its wire representation.

        ``parameters``/``arguments`` given as strings are treated as JSON
        text (OpenAI encodes ``arguments`` this way) and parsed lazily.

        Raises
        ------
        pydantic.ValidationError
            When ``payload`` does not match :class:`FunctionSpecDTO`.
        """
        dto = FunctionSpecDTO.model_validate(payload)
        params_text = isinstance(dto.parameters, str)
        args_text = isinstance(dto.arguments, str)
        fn = cls(
            dto.name,
            dto.description,
            parameters=None if params_text else dto.parameters,
            arguments=None if args_text else dto.arguments,
        )
        if params_text:
            fn._parameters.append(dto.parameters)
        if args_text:
            fn._arguments.append(dto.arguments)
        return fn

    def __repr__(self) -> str:
        return (
            f"FunctionDescriptor(name={self._name!r}, description={self._description!r}, "
            f"parameters_text={self._parameters.text!r}, arguments_text={self._arguments.text!r})"
        )


def function_from_delta(delta: Optional[FunctionDeltaLike]) -> FunctionDescriptor:
    """Start a new descriptor from the first streamed fragment of a call."""
    return FunctionDescriptor().merge_delta(delta)


__all__ = ["FunctionDescriptor", "function_from_delta"]
