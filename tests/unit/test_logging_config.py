"""Tests for the contextual logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from command_hub.logging_config import (
    NO_CONTEXT,
    ContextualLogger,
    _DefaultContextFilter,
    log_operation,
    setup_logger,
)


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def captured_logger(request):
    logger = setup_logger(name=f"command-hub-test.{request.node.name}", level="DEBUG")
    handler = ListHandler()
    logger.addHandler(handler)
    yield logger, handler.records
    logger.removeHandler(handler)


class TestSetupLogger:
    def test_returns_contextual_logger(self):
        logger = setup_logger(name="command-hub-test.setup", level="INFO")

        assert isinstance(logger, ContextualLogger)
        assert logger.level == logging.INFO
        assert logger.propagate is False

    def test_reconfiguring_replaces_handlers(self):
        setup_logger(name="command-hub-test.reconfigure", level="INFO")
        logger = setup_logger(name="command-hub-test.reconfigure", level="DEBUG")

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        logger = setup_logger(name="command-hub-test.env-level")

        assert logger.level == logging.ERROR

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logger(name="command-hub-test.bad-level", level="LOUD")

        assert logger.level == logging.INFO

    def test_file_logging(self, tmp_path):
        logger = setup_logger(
            name="command-hub-test.file",
            level="INFO",
            log_to_file=True,
            log_dir=str(tmp_path / "logs"),
        )
        logger.info("written to file")
        for handler in logger.handlers:
            handler.flush()

        file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        log_file = tmp_path / "logs" / "command-hub-test.file.log"
        content = log_file.read_text(encoding="utf-8")
        assert "written to file" in content
        assert f"[{NO_CONTEXT}]" in content

        setup_logger(name="command-hub-test.file")


class TestLogOperation:
    def test_context_is_attached_inside_operation(self, captured_logger):
        logger, records = captured_logger

        with log_operation(logger, "create_ticket", project="DTMI", trace_id="abc123"):
            logger.info("inside")
        logger.info("after")

        inside = next(r for r in records if r.getMessage() == "inside")
        after = next(r for r in records if r.getMessage() == "after")
        assert "operation=create_ticket" in inside.context
        assert "project=DTMI" in inside.context
        assert "trace_id=abc123" in inside.context
        assert after.context == NO_CONTEXT

    def test_start_and_completion_are_logged(self, captured_logger):
        logger, records = captured_logger

        with log_operation(logger, "read_ticket"):
            pass

        messages = [r.getMessage() for r in records]
        assert messages[0] == "Operation started: read_ticket"
        assert messages[1].startswith("Operation completed: read_ticket in ")

    def test_failure_is_logged_and_reraised(self, captured_logger):
        logger, records = captured_logger

        with pytest.raises(ValueError, match="bad key"):
            with log_operation(logger, "read_ticket"):
                raise ValueError("bad key")

        failure = records[-1]
        assert failure.levelno == logging.ERROR
        assert failure.getMessage().startswith("Operation failed: read_ticket after ")
        assert failure.getMessage().endswith("- bad key")

    def test_nested_operations_restore_outer_context(self, captured_logger):
        logger, records = captured_logger

        with log_operation(logger, "outer", trace_id="outer1"):
            with log_operation(logger, "inner", trace_id="inner1"):
                pass
            logger.info("back in outer")

        back = next(r for r in records if r.getMessage() == "back in outer")
        assert "operation=outer" in back.context
        assert "trace_id=outer1" in back.context

    def test_trace_id_is_generated(self, captured_logger):
        logger, _ = captured_logger

        operation = log_operation(logger, "create_ticket")

        assert len(operation.trace_id) == 8


class TestDefaultContextFilter:
    def test_fills_missing_context(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        assert _DefaultContextFilter().filter(record) is True
        assert record.context == NO_CONTEXT

    def test_keeps_existing_context(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        record.context = "operation=read_ticket"

        _DefaultContextFilter().filter(record)

        assert record.context == "operation=read_ticket"
