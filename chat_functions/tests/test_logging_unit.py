"""Unit coverage for structured logging utilities and helpers."""

from __future__ import annotations

import json
import logging

from chat_functions.base.logging import LogContext, configure_logger, get_logger, log_event
from chat_functions.base.log_support import JsonFormatter


def test_log_context_prunes_none_and_merges_extra():
    ctx = LogContext(function="f", index=0, extra={"attempt": 2, "skip": None})
    assert ctx.to_dict() == {"function": "f", "index": 0, "attempt": 2}  # nosec B101


def test_log_event_emits_json_payload(caplog):
    caplog.set_level(logging.INFO, logger="chat_functions")
    logger = get_logger("chat_functions.test")
    log_event(logger, "tool.dispatch", LogContext(function="echo"), params=["a"], dropped=None)
    (record,) = [r for r in caplog.records if r.name == "chat_functions.test"]
    payload = json.loads(record.getMessage())
    assert payload == {"event": "tool.dispatch", "function": "echo", "params": ["a"]}  # nosec B101


def test_log_event_respects_level(caplog):
    caplog.set_level(logging.WARNING, logger="chat_functions")
    logger = get_logger("chat_functions.quiet")
    log_event(logger, "stream.finalized", level=logging.DEBUG, calls=1)
    assert not [r for r in caplog.records if r.name == "chat_functions.quiet"]  # nosec B101


def test_configure_logger_accepts_level_names():
    logger = configure_logger(level="ERROR")
    try:
        assert logger.level == logging.ERROR  # nosec B101
    finally:
        configure_logger(level=logging.INFO)


def test_json_formatter_hoists_json_message() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord("chat_functions", logging.INFO, __file__, 1, json.dumps({"event": "x", "n": 1}), None, None)
    out = json.loads(formatter.format(record))
    assert out["event"] == "x" and out["n"] == 1  # nosec B101
    assert "msg" not in out  # nosec B101
    assert out["level"] == "INFO"  # nosec B101


def test_json_formatter_keeps_plain_message() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord("chat_functions", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    out = json.loads(formatter.format(record))
    assert out["msg"] == "hello world"  # nosec B101
