"""
Tests for the logging setup.
"""

import logging

import pytest

from ruleguard import evaluate
from ruleguard.utils import logger as logger_module
from ruleguard.utils.logger import ColoredFormatter, RuleguardLogger, get_logger, setup_logger


@pytest.fixture
def fresh_logger():
    """Reset the logger singleton around a test."""
    RuleguardLogger._initialized = False
    RuleguardLogger._instance = None
    logger_module._logger = None
    yield
    logging.getLogger("ruleguard").handlers.clear()
    RuleguardLogger._initialized = False
    RuleguardLogger._instance = None
    logger_module._logger = None


class TestLoggerSetup:
    """Test logger construction."""

    def test_singleton(self, fresh_logger):
        assert get_logger() is get_logger()

    def test_level_from_config(self, fresh_logger, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert get_logger().main_logger.level == logging.DEBUG

    def test_file_handler_only_with_log_dir(self, fresh_logger, tmp_path):
        quiet = setup_logger(log_level="INFO")
        assert not any(isinstance(h, logging.FileHandler) for h in quiet.main_logger.handlers)

        logged = setup_logger(log_dir=str(tmp_path / "logs"), log_level="INFO")
        assert any(isinstance(h, logging.FileHandler) for h in logged.main_logger.handlers)
        logged.warning("hello")
        for handler in logged.main_logger.handlers:
            handler.flush()
        files = list((tmp_path / "logs").glob("ruleguard_*.log"))
        assert len(files) == 1
        assert "hello" in files[0].read_text(encoding="utf-8")
        for handler in logged.main_logger.handlers:
            handler.close()


    def test_exposes_only_used_methods(self, fresh_logger):
        log = get_logger()
        assert callable(log.warning)
        assert callable(log.rule_failure)
        for name in ("info", "debug", "error"):
            assert not hasattr(log, name)


class TestRuleFailureLogging:
    """Test structured failure lines."""

    def test_reported_failure_is_logged_at_debug(self, fresh_logger):
        log = setup_logger(log_level="DEBUG")
        records = []

        class ListHandler(logging.Handler):
            def emit(self, record):
                records.append(record)

        log.main_logger.addHandler(ListHandler())
        evaluate("create_user", ["age", "x", "integer"], report=True)

        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        message = records[0].getMessage()
        assert message.startswith("[RULE:TEST_FAILED] | label=create_user | ")
        assert "should have as type integer" in message

    def test_colored_formatter_leaves_record_untouched(self):
        record = logging.LogRecord("ruleguard", logging.WARNING, __file__, 1, "careful", None, None)
        formatted = ColoredFormatter("%(levelname)s %(message)s").format(record)
        assert "careful" in formatted
        assert record.levelname == "WARNING"
        assert record.msg == "careful"
