"""Test structured logging setup."""

import io
import json
import logging

import pytest

from forge_mock.core.config import Settings
from forge_mock.core.logging import HANDLER_NAME, setup_logging


@pytest.fixture
def log_stream():
    """Install the service handler on a buffer and restore the root logger afterwards"""
    root = logging.getLogger()
    level = root.level
    stream = io.StringIO()

    yield stream

    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(level)


def _records(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


class TestSetupLogging:
    """Test the root handler installed by setup_logging."""

    def test_extra_fields_become_event_keys(self, log_stream):
        setup_logging(Settings(LOG_FORMAT="json", LOG_LEVEL="INFO"), stream=log_stream)

        logging.getLogger("forge_mock.api.resources").info(
            "Created gateway",
            extra={"kind": "gateway", "resource_id": "gateway-1"}
        )

        record = _records(log_stream)[-1]
        assert record["event"] == "Created gateway"
        assert record["kind"] == "gateway"
        assert record["resource_id"] == "gateway-1"
        assert record["level"] == "info"
        assert record["logger"] == "forge_mock.api.resources"
        assert "timestamp" in record

    def test_level_filters_records(self, log_stream):
        setup_logging(Settings(LOG_FORMAT="json", LOG_LEVEL="WARNING"), stream=log_stream)

        logger = logging.getLogger("forge_mock.core.policy")
        logger.info("Listed gateways")
        logger.warning("Request body failed validation", extra={"errors": 2})

        records = _records(log_stream)
        assert [r["event"] for r in records] == ["Request body failed validation"]
        assert records[0]["errors"] == 2

    def test_repeated_setup_replaces_handler(self, log_stream):
        setup_logging(Settings(LOG_FORMAT="json"), stream=io.StringIO())
        setup_logging(Settings(LOG_FORMAT="json"), stream=log_stream)

        names = [h.get_name() for h in logging.getLogger().handlers]
        assert names.count(HANDLER_NAME) == 1

    def test_exceptions_are_rendered(self, log_stream):
        setup_logging(Settings(LOG_FORMAT="json", LOG_LEVEL="INFO"), stream=log_stream)

        try:
            raise RuntimeError("boom")
        except RuntimeError:
            logging.getLogger("forge_mock.main").error("Unhandled exception", exc_info=True)

        record = _records(log_stream)[-1]
        assert "RuntimeError: boom" in record["exception"]
