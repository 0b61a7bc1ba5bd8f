"""Unit tests for logging helpers."""

import json
import logging

import pytest

from pagewise.core.logging import CustomJsonFormatter, get_logger, log_event


@pytest.mark.unit
class TestLogEvent:
    """Test structured event logging."""

    def test_message_includes_fields(self, caplog):
        logger = get_logger("pagewise.test")

        with caplog.at_level("INFO"):
            log_event(logger, "info", "page_computed", total=25, page=2)

        record = caplog.records[-1]
        assert record.message == 'page_computed: {"total": 25, "page": 2}'
        assert record.event == "page_computed"
        assert record.total == 25

    def test_message_without_fields(self, caplog):
        logger = get_logger("pagewise.test")

        with caplog.at_level("WARNING"):
            log_event(logger, "warning", "something_odd")

        assert caplog.records[-1].message == "something_odd"
        assert caplog.records[-1].levelno == logging.WARNING

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            log_event(get_logger("pagewise.test"), "loud", "event")


@pytest.mark.unit
class TestCustomJsonFormatter:
    """Test JSON log formatting."""

    def test_adds_context_fields(self):
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        record = logging.LogRecord(
            "pagewise.test", logging.INFO, __file__, 1, "hello", None, None
        )
        record.event = "hello_event"

        output = json.loads(formatter.format(record))

        assert output["message"] == "hello"
        assert output["level"] == "INFO"
        assert output["logger"] == "pagewise.test"
        assert output["app_name"] == "pagewise"
        assert output["event"] == "hello_event"
        assert "timestamp" in output


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.mark.unit
class TestSetupLogging:
    """Test root logger configuration."""

    def test_installs_single_stdout_handler(self, restore_root_logger, monkeypatch):
        from pagewise.core import logging as logging_module

        monkeypatch.setattr(logging_module.settings, "log_json", False)
        logging_module.setup_logging()

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert not isinstance(handlers[0].formatter, CustomJsonFormatter)
        assert restore_root_logger.level == logging.INFO

    def test_json_formatter(self, restore_root_logger, monkeypatch):
        from pagewise.core import logging as logging_module

        monkeypatch.setattr(logging_module.settings, "log_json", True)
        logging_module.setup_logging()

        assert isinstance(restore_root_logger.handlers[0].formatter, CustomJsonFormatter)
