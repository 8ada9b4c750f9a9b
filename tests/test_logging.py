"""Tests for transpace.logging."""
import json
import logging

import pytest

from transpace.engine.sequence import encode_all
from transpace.logging import (
    ConsoleFormatter,
    JsonFormatter,
    get_logger,
    setup_logging,
    trace,
)


def _record(**extra):
    record = logging.LogRecord("transpace.test", logging.INFO, "", 0, "hello", (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    def test_json_plain_message(self):
        entry = json.loads(JsonFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["src"] == "transpace.test"
        assert entry["msg"] == "hello"
        assert entry["ts"].endswith("Z")

    def test_json_event(self):
        entry = json.loads(JsonFormatter().format(
            _record(event="encode_all.done", duration_ms=1.23456, ctx={"result": "x"})
        ))
        assert entry["event"] == "encode_all.done"
        assert entry["duration_ms"] == 1.23
        assert entry["ctx"] == {"result": "x"}
        assert "msg" not in entry

    def test_console_without_color(self):
        line = ConsoleFormatter(color=False).format(
            _record(event="encode_all.done", duration_ms=2.0, ctx={"result": "UnitSequence[2]"})
        )
        assert "INFO" in line
        assert "[transpace.test]" in line
        assert "encode_all.done (2.0ms) result=UnitSequence[2]" in line
        assert "\033[" not in line

    def test_console_truncates_context(self):
        line = ConsoleFormatter(color=False).format(_record(event="e", ctx={"arg": "x" * 200}))
        assert "x" * 80 + "..." in line


class TestSetupLogging:
    def test_logger_namespace(self):
        assert get_logger("cli").name == "transpace.cli"

    def test_handlers(self, tmp_path):
        log_file = tmp_path / "transpace.log"
        setup_logging("debug", log_file=str(log_file))
        root = logging.getLogger("transpace")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        get_logger("test").info("written")
        for handler in root.handlers:
            handler.flush()
        entry = json.loads(log_file.read_text().splitlines()[-1])
        assert entry["msg"] == "written"

    def test_unknown_level_falls_back(self):
        setup_logging("chatty")
        assert logging.getLogger("transpace").level == logging.WARNING


class TestTrace:
    def test_entry_points_traced(self, caplog):
        caplog.set_level(logging.DEBUG, logger="transpace")
        encode_all("ael-in-image")
        events = [getattr(r, "event", None) for r in caplog.records]
        assert "encode_all.enter" in events
        assert "encode_all.done" in events

    def test_error_logged_and_reraised(self, caplog):
        caplog.set_level(logging.DEBUG, logger="transpace")
        with pytest.raises(ValueError):
            encode_all("bad!")
        errors = [r for r in caplog.records if getattr(r, "event", None) == "encode_all.error"]
        assert len(errors) == 1
        assert errors[0].exc_info is not None

    def test_silent_when_debug_disabled(self, caplog):
        caplog.set_level(logging.WARNING, logger="transpace")
        encode_all("abc")
        assert not [r for r in caplog.records if hasattr(r, "event")]

    def test_custom_logger_name(self, caplog):
        caplog.set_level(logging.DEBUG, logger="transpace")

        @trace(logger_name="custom")
        def double(x):
            return x * 2

        assert double(4) == 8
        assert {r.name for r in caplog.records} == {"transpace.custom"}
