"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging

import structlog

from isbnctl.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("isbnctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("isbnctl").level == logging.WARNING

    def test_json_mode_output(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        structlog.get_logger("isbnctl.test").warning("json test", answer=42)
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "isbnctl.test"
        assert "timestamp" in parsed

    def test_stdlib_domain_logger_gets_structured_fields(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        logging.getLogger("isbnctl.domain.registry").debug("No registration group matches x")
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "No registration group matches x"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "isbnctl.domain.registry"

    def test_debug_suppressed_when_not_verbose(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, log_json=True, stream=stream)
        logging.getLogger("isbnctl.domain.isbn").debug("noise")
        assert stream.getvalue() == ""

    def test_human_mode_output(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, stream=stream)
        structlog.get_logger("isbnctl.test").warning("hello world", key="val")
        output = stream.getvalue()
        assert "hello world" in output
        assert "key" in output

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
