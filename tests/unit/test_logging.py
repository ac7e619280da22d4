"""Testes do logging estruturado e do correlation_id."""

from __future__ import annotations

import json
import logging

import pytest

from efsm.observability.context import bind_correlation_id, get_correlation_id
from efsm.observability.logging import CorrelationIdFilter, configure_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("efsm.test", logging.INFO, __file__, 1, "fsm_test", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture()
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestCorrelationId:
    def test_default_is_empty(self) -> None:
        assert get_correlation_id() == ""

    def test_bind_and_reset(self) -> None:
        with bind_correlation_id("sess-1") as value:
            assert value == "sess-1"
            assert get_correlation_id() == "sess-1"
        assert get_correlation_id() == ""

    def test_bind_generates_id(self) -> None:
        with bind_correlation_id() as value:
            assert len(value) == 36
            assert get_correlation_id() == value


class TestCorrelationIdFilter:
    def test_injects_context_value(self) -> None:
        record = _record()
        with bind_correlation_id("abc"):
            assert CorrelationIdFilter("efsm").filter(record) is True
        assert record.correlation_id == "abc"
        assert record.service == "efsm"

    def test_preserves_explicit_value(self) -> None:
        record = _record(correlation_id="explicit")
        with bind_correlation_id("ctx"):
            CorrelationIdFilter("efsm").filter(record)
        assert record.correlation_id == "explicit"


@pytest.mark.usefixtures("_restore_root_logger")
class TestConfigureLogging:
    def test_json_output(self) -> None:
        configure_logging("INFO", "efsm-test", "json")
        handler = logging.getLogger().handlers[0]
        record = _record(fsm="demo")
        handler.filter(record)

        payload = json.loads(handler.format(record))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "efsm.test"
        assert payload["message"] == "fsm_test"
        assert payload["service"] == "efsm-test"
        assert payload["fsm"] == "demo"

    def test_text_output(self) -> None:
        configure_logging("DEBUG", "efsm-test", "text")
        root = logging.getLogger()
        assert root.level == logging.DEBUG

        handler = root.handlers[0]
        record = _record()
        with bind_correlation_id("sess-9"):
            handler.filter(record)
        line = handler.format(record)
        assert "[sess-9]" in line
        assert line.endswith("fsm_test")
