"""Unit tests for FunctionDescriptor construction, delta merging and lazy parsing."""

from __future__ import annotations

import json
import logging
from types import SimpleNamespace

import pytest

from chat_functions.base.dto.function import FunctionDescriptor, function_from_delta
from chat_functions.base.errors import ErrorCode, FunctionParseError
from chat_functions.base.stubs import OpenAIFunctionDelta, OpenAIToolCallDelta


def _fn(name=None, description=None, arguments=None, parameters=None):
    return SimpleNamespace(name=name, description=description, arguments=arguments, parameters=parameters)


def test_direct_construction_returns_values_without_parsing():
    schema = {"type": "object", "properties": {"location": {"type": "string"}}}
    args = {"location": "NYC"}
    fn = FunctionDescriptor("get_weather", "Look up weather", parameters=schema, arguments=args)
    assert fn.name == "get_weather"  # nosec B101
    assert fn.description == "Look up weather"  # nosec B101
    assert fn.parameters is schema  # nosec B101
    assert fn.arguments is args  # nosec B101
    assert fn.parameters_text is None  # nosec B101
    assert fn.arguments_text is None  # nosec B101


def test_reads_before_any_text_return_none():
    fn = FunctionDescriptor()
    assert fn.parameters is None  # nosec B101
    assert fn.arguments is None  # nosec B101


def test_whitespace_text_is_not_parsed():
    fn = FunctionDescriptor().merge_delta(_fn(arguments="  \n", parameters="\t"))
    assert fn.arguments is None  # nosec B101
    assert fn.parameters is None  # nosec B101


def test_streamed_weather_call():
    fn = FunctionDescriptor()
    fn.merge_delta(_fn(name="get_weather"))
    fn.merge_delta(_fn(arguments='{"loc'))
    fn.merge_delta(_fn(arguments='ation":"NYC"}'))
    assert fn.name == "get_weather"  # nosec B101
    assert fn.arguments == {"location": "NYC"}  # nosec B101


def test_last_non_blank_name_and_description_win():
    fn = FunctionDescriptor()
    for name, desc in (("first", "one"), ("second", ""), ("  ", "two"), (None, "   "), ("third", None)):
        fn.merge_delta(_fn(name=name, description=desc))
    assert fn.name == "third"  # nosec B101
    assert fn.description == "two"  # nosec B101


def test_blank_description_keeps_prior_value():
    fn = FunctionDescriptor("f", "keep me")
    fn.merge_delta(_fn(description=""))
    assert fn.description == "keep me"  # nosec B101
    assert fn.name == "f"  # nosec B101


@pytest.mark.parametrize("size", [1, 2, 5, 17])
def test_fragments_equal_full_parse(size):
    payload = {"query": "weather in élan", "days": [1, 2, 3], "nested": {"ok": True, "n": None}}
    text = json.dumps(payload)
    fn = FunctionDescriptor()
    for i in range(0, len(text), size):
        fn.merge_delta(_fn(arguments=text[i : i + size]))
    assert fn.arguments_text == text  # nosec B101
    assert fn.arguments == json.loads(text)  # nosec B101


def test_parameters_fragments_are_appended():
    fn = FunctionDescriptor("search")
    fn.merge_delta(_fn(parameters='{"type": '))
    fn.merge_delta(_fn(parameters='"object"}'))
    assert fn.parameters == {"type": "object"}  # nosec B101


def test_repeated_reads_return_cached_object():
    fn = FunctionDescriptor().merge_delta(_fn(arguments='{"a": [1, 2]}'))
    first = fn.arguments
    assert fn.arguments is first  # nosec B101


def test_append_invalidates_cached_value():
    fn = FunctionDescriptor().merge_delta(_fn(arguments='{"a": 1}'))
    first = fn.arguments
    fn.merge_delta(_fn(arguments=" "))
    second = fn.arguments
    assert second == first  # nosec B101
    assert second is not first  # nosec B101


def test_literal_null_is_cached_as_none():
    fn = FunctionDescriptor().merge_delta(_fn(arguments="null"))
    assert fn.arguments is None  # nosec B101
    assert fn.arguments_text == "null"  # nosec B101


def test_merge_never_validates_and_read_retries_after_failure():
    fn = FunctionDescriptor("add").merge_delta(_fn(arguments='{"x": '))
    with pytest.raises(FunctionParseError) as info:
        _ = fn.arguments
    err = info.value
    assert isinstance(err, ValueError)  # nosec B101
    assert err.code is ErrorCode.VALIDATION  # nosec B101
    assert err.field == "arguments"  # nosec B101
    assert err.function == "add"  # nosec B101
    assert err.text == '{"x": '  # nosec B101
    assert isinstance(err.__cause__, json.JSONDecodeError)  # nosec B101
    assert err.raw is err.__cause__  # nosec B101

    # The failure is not memoized; completing the text makes the read succeed.
    fn.merge_delta(_fn(arguments="10}"))
    assert fn.arguments == {"x": 10}  # nosec B101


def test_parse_failure_is_logged(caplog):
    caplog.set_level(logging.WARNING, logger="chat_functions")
    fn = FunctionDescriptor("broken").merge_delta(_fn(parameters="{"))
    with pytest.raises(FunctionParseError):
        _ = fn.parameters
    events = [json.loads(r.getMessage()) for r in caplog.records if r.name.startswith("chat_functions")]
    assert any(e["event"] == "function.parse_error" and e["field"] == "parameters" for e in events)  # nosec B101
    assert any(e.get("function") == "broken" for e in events)  # nosec B101


def test_direct_value_is_replaced_once_text_arrives():
    fn = FunctionDescriptor("f", arguments={"old": True})
    fn.merge_delta(_fn(arguments='{"new": true}'))
    assert fn.arguments == {"new": True}  # nosec B101


def test_merge_accepts_mappings_and_tool_call_wrappers():
    fn = FunctionDescriptor()
    fn.merge_delta({"name": "lookup", "arguments": '{"id"'})
    fn.merge_delta(SimpleNamespace(index=0, id=None, function=_fn(arguments=": 7}")))
    fn.merge_delta({"function": {"description": "Find a record"}})
    assert fn.name == "lookup"  # nosec B101
    assert fn.description == "Find a record"  # nosec B101
    assert fn.arguments == {"id": 7}  # nosec B101


def test_merge_reencodes_decoded_fragments():
    fn = FunctionDescriptor().merge_delta(_fn(name="sum", arguments={"a": 1, "b": 2}))
    assert fn.arguments_text == '{"a": 1, "b": 2}'  # nosec B101
    assert fn.arguments == {"a": 1, "b": 2}  # nosec B101


def test_merge_ignores_none_delta():
    fn = FunctionDescriptor("keep")
    assert fn.merge_delta(None) is fn  # nosec B101
    assert fn.name == "keep"  # nosec B101


def test_function_from_delta_starts_new_descriptor():
    fn = function_from_delta(_fn(name="start", arguments="{"))
    assert isinstance(fn, FunctionDescriptor)  # nosec B101
    assert fn.name == "start"  # nosec B101
    assert fn.arguments_text == "{"  # nosec B101


def test_attributes_are_read_only():
    fn = FunctionDescriptor("fixed")
    with pytest.raises(AttributeError):
        fn.name = "other"  # type: ignore[misc]


def test_utf8_sequence_split_across_byte_chunks():
    raw = '{"q": "é"}'.encode("utf-8")
    cut = raw.index(b"\xc3") + 1
    fn = FunctionDescriptor()
    fn.merge_delta(_fn(arguments=raw[:cut]))
    fn.merge_delta(_fn(arguments=raw[cut:]))
    assert fn.arguments_text == '{"q": "é"}'  # nosec B101
    assert fn.arguments == {"q": "é"}  # nosec B101


def test_read_inside_split_sequence_fails_then_recovers():
    fn = FunctionDescriptor("f").merge_delta(_fn(arguments=b'"\xc3'))
    with pytest.raises(FunctionParseError) as info:
        _ = fn.arguments
    assert isinstance(info.value.raw, UnicodeDecodeError)  # nosec B101
    fn.merge_delta(_fn(arguments=b'\xa9"'))
    assert fn.arguments == "é"  # nosec B101


def test_invalid_bytes_surface_at_read_not_merge():
    fn = FunctionDescriptor("f")
    fn.merge_delta(_fn(arguments=b'{"a": "\xff"}'))
    with pytest.raises(FunctionParseError) as info:
        _ = fn.arguments
    assert info.value.code is ErrorCode.VALIDATION  # nosec B101
    assert isinstance(info.value.__cause__, UnicodeDecodeError)  # nosec B101


def test_text_after_dangling_bytes_is_reported_at_read():
    fn = FunctionDescriptor("f")
    fn.merge_delta(_fn(arguments=b"[\xc3"))
    fn.merge_delta(_fn(arguments="1]"))
    with pytest.raises(FunctionParseError):
        _ = fn.arguments


def test_sdk_shaped_fragments_satisfy_delta_protocols():
    fragment = _fn(name="f", arguments="{}")
    call = SimpleNamespace(index=0, id="call_1", function=fragment)
    assert isinstance(fragment, OpenAIFunctionDelta)  # nosec B101
    assert isinstance(call, OpenAIToolCallDelta)  # nosec B101
    assert FunctionDescriptor().merge_delta(call).arguments == {}  # nosec B101
