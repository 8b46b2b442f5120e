# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.
"""Unit tests for structured JSON logging."""

import json
import logging
import sys

import pytest

from plan_auditor.core.logging import StructuredFormatter, setup_logging


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="plan_auditor.test", level=logging.INFO, pathname=__file__,
        lineno=1, msg=msg, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_basic_fields(self):
        entry = json.loads(StructuredFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["module"] == "plan_auditor.test"
        assert entry["message"] == "hello"
        assert "timestamp" in entry

    def test_prompt_context(self, tmp_path):
        record = _record(prompt_source="override", prompt_path=tmp_path / "system.md")
        entry = json.loads(StructuredFormatter().format(record))
        assert entry["prompt_source"] == "override"
        assert entry["prompt_path"] == str(tmp_path / "system.md")

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        entry = json.loads(StructuredFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_installs_single_json_handler(self):
        setup_logging("debug")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO
