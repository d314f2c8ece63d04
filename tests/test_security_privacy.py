"""Security and privacy tests: log sanitization and one-way output."""

from __future__ import annotations

import logging

import pytest

from passcraft.core.hashing import format_password
from passcraft.core.logging import (
    SanitizingFilter,
    configure_logging,
    install_sanitizing_filter,
    redact_message,
)
from passcraft.core.types import EffectiveConfig


class TestLogSanitization:
    def test_redacts_email_value(self) -> None:
        msg = "Parsing email:alice@example.org from identity list"
        result = redact_message(msg)
        assert "alice@example.org" not in result
        assert "email=[REDACTED]" in result

    def test_redacts_digest(self) -> None:
        msg = "method=MD5 digest=5eb63bbbe01eeed093cb22bb8f5acdc3"
        result = redact_message(msg)
        assert "5eb63bbb" not in result
        assert "method=MD5" in result

    def test_redacts_quoted_base_text(self) -> None:
        result = redact_message('base_text="a,b@c,d" built')
        assert "b@c" not in result
        assert result == "base_text=[REDACTED] built"

    def test_preserves_safe_messages(self) -> None:
        msg = "Config file cfg.txt has no usable lines"
        assert redact_message(msg) == msg

    def test_filter_on_real_logger(self) -> None:
        logger = logging.getLogger("passcraft.test.sanitize")
        logger.setLevel(logging.DEBUG)
        logger.handlers.clear()
        logger.propagate = False

        handler = logging.StreamHandler()
        logger.addHandler(handler)

        filt = install_sanitizing_filter(logger)
        try:
            assert filt in handler.filters
            record = logger.makeRecord(
                "passcraft.test", logging.INFO, "", 0,
                "Generated password=%s", ("test,ABC!,site",), None,
            )
            filt.filter(record)
            assert "ABC!" not in record.getMessage()
            assert "[REDACTED]" in record.getMessage()
        finally:
            logger.removeHandler(handler)

    def test_repeated_install_does_not_stack_filters(self) -> None:
        logger = logging.getLogger("passcraft.test.stacking")
        logger.handlers.clear()
        logger.propagate = False
        handler = logging.StreamHandler()
        logger.addHandler(handler)
        try:
            for _ in range(3):
                install_sanitizing_filter(logger)
            sanitizers = [f for f in handler.filters if isinstance(f, SanitizingFilter)]
            assert len(sanitizers) == 1
        finally:
            logger.removeHandler(handler)

    def test_formatter_debug_logs_are_redacted(
        self, caplog: pytest.LogCaptureFixture, valid_config: EffectiveConfig,
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="passcraft.core.hashing")
        filt = SanitizingFilter()
        caplog.handler.addFilter(filt)
        try:
            format_password(valid_config)
        finally:
            caplog.handler.removeFilter(filt)
        assert caplog.records
        assert "test@example.com" not in caplog.text
        assert "base_text=[REDACTED]" in caplog.text


class TestConfigureLogging:
    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("chatty")

    def test_sets_package_level(self) -> None:
        configure_logging("debug")
        assert logging.getLogger("passcraft").level == logging.DEBUG
        configure_logging(logging.WARNING)
        assert logging.getLogger("passcraft").level == logging.WARNING

    def test_repeated_configure_keeps_one_filter_per_handler(self) -> None:
        for _ in range(3):
            configure_logging("warning")
        for handler in logging.getLogger().handlers:
            sanitizers = [f for f in handler.filters if isinstance(f, SanitizingFilter)]
            assert len(sanitizers) <= 1
