from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from otpextract.utils.logging import get_logger, rich_logs_enabled, set_level


def test_get_logger_is_idempotent():
    logger = get_logger("test.idempotent")
    assert get_logger("test.idempotent") is logger
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_plain_handler(monkeypatch):
    monkeypatch.setenv("OTPEXTRACT_RICH_LOGS", "off")
    logger = get_logger("test.plain")
    assert not isinstance(logger.handlers[0], RichHandler)


def test_rich_handler_by_default(monkeypatch):
    monkeypatch.delenv("OTPEXTRACT_RICH_LOGS", raising=False)
    logger = get_logger("test.rich")
    assert isinstance(logger.handlers[0], RichHandler)


def test_set_level():
    logger = get_logger("test.level", rich=False)
    set_level("test.level", logging.DEBUG)
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG


@pytest.mark.parametrize(
    "raw, enabled",
    [(None, True), ("", True), ("  ", True), ("1", True), ("yes", True), ("off", False), (" No ", False), ("plain", False)],
)
def test_rich_logs_flag(monkeypatch, raw, enabled):
    if raw is None:
        monkeypatch.delenv("OTPEXTRACT_RICH_LOGS", raising=False)
    else:
        monkeypatch.setenv("OTPEXTRACT_RICH_LOGS", raw)
    assert rich_logs_enabled() is enabled
