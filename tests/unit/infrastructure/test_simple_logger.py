"""Tests for the SimpleLogger adapter."""

import logging

import pytest

from pubsub_hub.infrastructure.simple_logger import ContextFormatter, SimpleLogger
from pubsub_hub.ports.logger import LoggerPort


def _record(message: str, context=None) -> logging.LogRecord:
    record = logging.LogRecord("pubsub_hub", logging.INFO, __file__, 1, message, None, None)
    if context is not None:
        record.context = context
    return record


class TestContextFormatter:
    """Test cases for ContextFormatter."""

    def test_appends_context_pairs(self):
        formatter = ContextFormatter("%(levelname)s - %(message)s")

        text = formatter.format(_record("Sent ET1 event", {"event_id": "e1", "channel": "folio.t1.ET1"}))

        assert text == "INFO - Sent ET1 event [event_id=e1 channel=folio.t1.ET1]"

    def test_skips_none_values(self):
        formatter = ContextFormatter("%(message)s")

        text = formatter.format(_record("Event was not sent", {"event_id": "e1", "channel": None}))

        assert text == "Event was not sent [event_id=e1]"

    @pytest.mark.parametrize("context", [None, {}, {"channel": None}])
    def test_without_context(self, context):
        assert ContextFormatter("%(message)s").format(_record("plain", context)) == "plain"


class TestSimpleLogger:
    """Test cases for SimpleLogger."""

    def test_implements_port(self):
        assert isinstance(SimpleLogger("pubsub_hub.test.port"), LoggerPort)

    def test_level_by_name(self):
        logger = SimpleLogger("pubsub_hub.test.level", level="DEBUG")
        assert logger._logger.level == logging.DEBUG

    def test_handler_added_once_with_context_formatter(self):
        SimpleLogger("pubsub_hub.test.handlers")
        SimpleLogger("pubsub_hub.test.handlers")

        handlers = logging.getLogger("pubsub_hub.test.handlers").handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, ContextFormatter)

    @pytest.mark.parametrize("method", ["debug", "info", "warning", "error"])
    def test_levels_with_context(self, caplog, method):
        logger = SimpleLogger("pubsub_hub.test.context", level=logging.DEBUG)

        with caplog.at_level(logging.DEBUG, logger="pubsub_hub.test.context"):
            getattr(logger, method)("Sent ET1 event", event_id="e1", channel="folio.t1.ET1")

        record = caplog.records[-1]
        assert record.levelname == method.upper()
        assert record.getMessage() == "Sent ET1 event"
        assert record.context == {"event_id": "e1", "channel": "folio.t1.ET1"}

    def test_reserved_record_names_are_safe(self, caplog):
        logger = SimpleLogger("pubsub_hub.test.reserved")

        with caplog.at_level(logging.INFO, logger="pubsub_hub.test.reserved"):
            logger.info("Worker pool started", name="event-publishing", message="m")

        assert caplog.records[-1].context["name"] == "event-publishing"

    def test_exception_attaches_given_error(self, caplog):
        logger = SimpleLogger("pubsub_hub.test.exception")
        error = RuntimeError("audit store down")

        with caplog.at_level(logging.ERROR, logger="pubsub_hub.test.exception"):
            logger.exception("Failed to save audit message", exc_info=error, event_id="e1")

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.exc_info[1] is error
        assert record.context == {"event_id": "e1"}

    def test_exception_inside_handler_uses_current_error(self, caplog):
        logger = SimpleLogger("pubsub_hub.test.current")

        with caplog.at_level(logging.ERROR, logger="pubsub_hub.test.current"):
            try:
                raise ValueError("current")
            except ValueError:
                logger.exception("Handler failed")

        assert isinstance(caplog.records[-1].exc_info[1], ValueError)
