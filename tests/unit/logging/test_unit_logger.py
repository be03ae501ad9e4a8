# tests/unit/logging/test_unit_logger.py - v1
"""Tests for logging/logger.py."""

from __future__ import annotations

import json
import logging

from cachesanity.config.settings import Settings
from cachesanity.logging.context import (
    clear_context,
    set_check_context,
    set_detector_context,
)
from cachesanity.logging.logger import (
    JsonFormatter,
    TextFormatter,
    setup_logging,
    setup_logging_from_settings,
)

def _record(msg: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="test", level=logging.INFO, pathname="", lineno=0,
        msg=msg, args=(), exc_info=None,
    )

class TestJsonFormatter:
    def setup_method(self):
        clear_context()

    def teardown_method(self):
        clear_context()

    def test_format_basic(self):
        parsed = json.loads(JsonFormatter().format(_record("Hello")))
        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Hello"
        assert "timestamp" in parsed
        assert "context" not in parsed

    def test_format_with_context(self):
        set_check_context("abc123")
        set_detector_context("subreaders")
        parsed = json.loads(JsonFormatter().format(_record("test msg")))
        assert parsed["context"] == {"check_id": "abc123", "detector": "subreaders"}

    def test_format_with_data(self):
        record = _record("with data")
        record.data = {"entries": 3}
        parsed = json.loads(JsonFormatter().format(record))
        assert parsed["data"] == {"entries": 3}

class TestTextFormatter:
    def teardown_method(self):
        clear_context()

    def test_format_basic(self):
        output = TextFormatter().format(_record("Hello text"))
        assert "Hello text" in output
        assert "INFO" in output

    def test_format_with_context(self):
        set_check_context("abc123")
        set_detector_context("value_mismatch")
        output = TextFormatter().format(_record("msg"))
        assert "[abc123]" in output
        assert "(value_mismatch)" in output


class TestSetupLogging:
    def teardown_method(self):
        logging.getLogger("cachesanity").handlers.clear()
        logging.getLogger("cachesanity").setLevel(logging.NOTSET)

    def test_setup_json(self):
        setup_logging(level="DEBUG", log_format="json")
        root = logging.getLogger("cachesanity")
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_setup_text(self):
        setup_logging(level="INFO", log_format="text")
        root = logging.getLogger("cachesanity")
        assert root.level == logging.INFO
        assert isinstance(root.handlers[0].formatter, TextFormatter)

    def test_reinit_does_not_duplicate(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("cachesanity").handlers) == 1

    def test_with_file(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "logs" / "check.log"))
        assert len(logging.getLogger("cachesanity").handlers) == 2
        assert (tmp_path / "logs").exists()

    def test_from_settings(self):
        settings = Settings(_env_file=None, log_level="warning", log_format="json")
        setup_logging_from_settings(settings)
        root = logging.getLogger("cachesanity")
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
