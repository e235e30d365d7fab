"""Tests for logging helpers."""

import logging

import pytest

from src.utils.logging import LogContext, get_logger


class TestLogContext:
    """Tests for LogContext prefixes."""

    def test_prefixes_messages(self, caplog: pytest.LogCaptureFixture):
        log = LogContext(get_logger("tests.logging"), provider="github", uid="42")

        with caplog.at_level(logging.INFO, logger="tests.logging"):
            log.info("Signed in user 1")
            log.warning("Rejected auth payload")

        assert [r.getMessage() for r in caplog.records] == [
            "[provider=github] [uid=42] Signed in user 1",
            "[provider=github] [uid=42] Rejected auth payload",
        ]
        assert [r.levelno for r in caplog.records] == [logging.INFO, logging.WARNING]
