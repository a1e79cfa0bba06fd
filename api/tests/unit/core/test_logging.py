"""Unit tests for logging helpers."""

import json
import logging

import pytest

from newsdesk.core.logging import CustomJsonFormatter, get_logger, log_event


@pytest.mark.unit
class TestLogEvent:
    """Test structured event logging."""

    def test_event_without_fields(self, caplog):
        logger = get_logger("newsdesk.tests")

        with caplog.at_level("INFO"):
            log_event(logger, "info", "news_listed")

        assert caplog.records[-1].message == "news_listed"
        assert caplog.records[-1].event == "news_listed"

    def test_event_fields_in_message_and_record(self, caplog):
        logger = get_logger("newsdesk.tests")

        with caplog.at_level("DEBUG"):
            log_event(logger, "debug", "page_clamped", page=9, pages=2)

        record = caplog.records[-1]
        assert record.levelname == "DEBUG"
        assert record.message == 'page_clamped: {"page": 9, "pages": 2}'
        assert record.page == 9

    def test_unknown_level_is_rejected(self):
        with pytest.raises(ValueError):
            log_event(get_logger("newsdesk.tests"), "verbose", "event")


@pytest.mark.unit
class TestCustomJsonFormatter:
    """Test JSON log output."""

    def test_adds_application_context(self):
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        record = logging.LogRecord(
            "newsdesk.pagination", logging.INFO, __file__, 1, "Listed", None, None
        )
        record.page = 3

        output = json.loads(formatter.format(record))

        assert output["message"] == "Listed"
        assert output["level"] == "INFO"
        assert output["logger"] == "newsdesk.pagination"
        assert output["app_name"] == "Newsdesk"
        assert output["page"] == 3
        assert "timestamp" in output
