"""Tests for structured logging."""

import json
import logging

import pytest

from rebalancer_app.context import clear_current_session, set_current_session
from rebalancer_app.logger import AppLogger, StructuredFormatter, configure_root_logger
from rebalancer_app.session import PortfolioSession
from rebalancer_config import AppConfig


def make_record(**extra):
    record = logging.LogRecord("rebalancer_app.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Text and JSON rendering."""

    def test_text_includes_session_context(self):
        output = StructuredFormatter("text").format(make_record(session_id="abc", asset_count=3))

        assert "rebalancer_app.test - INFO - hello world" in output
        assert output.endswith("[session_id=abc] [assets=3]")

    def test_json(self):
        output = json.loads(StructuredFormatter("json").format(make_record(session_id="abc", extra_field=1)))

        assert output["message"] == "hello world"
        assert output["level"] == "INFO"
        assert output["session_id"] == "abc"
        assert output["extra_field"] == 1


class TestAppLogger:
    """Session context propagation."""

    def test_context_attached_to_records(self, caplog, memory_store):
        session = PortfolioSession(store=memory_store)
        set_current_session(session)
        try:
            with caplog.at_level(logging.INFO):
                AppLogger("rebalancer_app.test").log_info("inside")
        finally:
            clear_current_session()

        record = caplog.records[-1]
        assert record.session_id == session.session_id
        assert record.asset_count == 0

    def test_no_context(self, caplog):
        with caplog.at_level(logging.WARNING):
            AppLogger("rebalancer_app.test").log_warning("outside")

        assert not hasattr(caplog.records[-1], "session_id")


class TestConfigureRootLogger:
    """Root handler installation."""

    def test_console_only(self, restore_root_logger):
        configure_root_logger(AppConfig(logging={"level": "warning"}))

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1

    def test_file_handler(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "rebalancer.log"

        configure_root_logger(AppConfig(logging={"file_path": str(log_file), "format": "json"}))
        logging.getLogger("rebalancer_app.test").info("written")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert len(restore_root_logger.handlers) == 2
        assert json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])["message"] == "written"
