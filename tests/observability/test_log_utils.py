"""
Test suite for logging configuration and structured logging helpers.

System role: Verification of the diagnostic channel
"""

import logging

import pytest

from herodesk.models.hero import Hero
from herodesk.observability import (
    configure_logging,
    get_logger,
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)


@pytest.fixture
def restore_root_logger():
    """Restore root handlers and level after configure_logging runs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSafeLogValue:
    """Test suite for safe_log_value."""

    def test_summarizes_collections(self) -> None:
        assert safe_log_value(None) == "None"
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_renders_models_by_field(self) -> None:
        assert safe_log_value(Hero(id=11, name="Mr. Nice")) == "Hero(id=11, name='Mr. Nice')"

    def test_truncates_long_strings(self) -> None:
        result = safe_log_value("x" * 20, max_length=5)

        assert result == "xxxxx... (20 chars)"


class TestLogHelpers:
    """Test suite for log_with_context and log_exception_with_context."""

    def test_log_with_context_attaches_extra(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("herodesk.test")

        with caplog.at_level(logging.INFO):
            log_with_context(logger, logging.INFO, "Heroes listed", hero_count=[1, 2])

        assert caplog.records[-1].hero_count == "list(2 items)"

    def test_log_with_context_prefixes_record_attributes(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        logger = get_logger("herodesk.test")

        with caplog.at_level(logging.INFO):
            log_with_context(logger, logging.INFO, "Hero renamed", name="Narco", hero_id=12)

        record = caplog.records[-1]
        assert record.name == "herodesk.test"
        assert record.ctx_name == "Narco"
        assert record.hero_id == "12"

    def test_log_with_context_skips_disabled_levels(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        logger = get_logger("herodesk.test")

        with caplog.at_level(logging.INFO):
            log_with_context(logger, logging.DEBUG, "Heroes listed", hero_count=3)

        assert caplog.records == []

    def test_log_exception_with_context_keeps_traceback(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        logger = get_logger("herodesk.test")
        error = ValueError("bad hero")

        with caplog.at_level(logging.ERROR):
            log_exception_with_context(logger, "Hero operation failed", error, operation="add_hero")

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.error_type == "ValueError"
        assert record.error_msg == "bad hero"
        assert record.exc_info[1] is error


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_installs_single_stdout_handler(self, restore_root_logger) -> None:
        configure_logging("DEBUG")
        configure_logging("DEBUG")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, restore_root_logger) -> None:
        configure_logging("LOUD")

        assert logging.getLogger().level == logging.INFO
