"""Structured Logging — tests for JSONFormatter and setup_logging.

Tests cover:
    - JSON output carries the base fields and known extras only
    - None-valued extras are omitted
    - setup_logging installs a stderr handler with the requested formatter
"""

import json
import logging
import sys

import pytest

from kaprekar.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "kaprekar.main", logging.INFO, __file__, 1, "Seek %s", ("finished",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "kaprekar.main"
    assert log["message"] == "Seek finished"
    assert "timestamp" in log


def test_json_formatter_surfaces_extras():
    log = json.loads(JSONFormatter().format(
        _record(start_value=1205, iterations=8, outcome="converged", unrelated="x"),
    ))
    assert log["start_value"] == 1205
    assert log["iterations"] == 8
    assert log["outcome"] == "converged"
    assert "unrelated" not in log


def test_json_formatter_skips_none_extras():
    log = json.loads(JSONFormatter().format(_record(error_code=None)))
    assert "error_code" not in log


@pytest.fixture
def restore_root_logger():
    handlers, level = list(logging.root.handlers), logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def test_setup_logging_json(restore_root_logger):
    handler = setup_logging("debug", "json")
    assert handler in logging.root.handlers
    assert isinstance(handler.formatter, JSONFormatter)
    assert handler.stream is sys.stderr
    assert logging.root.level == logging.DEBUG


def test_setup_logging_text_with_unknown_level(restore_root_logger):
    handler = setup_logging("nonsense", "text")
    assert not isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.INFO


def test_json_formatter_carries_error_envelope():
    envelope = {"code": "INVALID_INPUT", "category": "validation"}
    log = json.loads(JSONFormatter().format(_record(error=envelope)))
    assert log["error"] == envelope
