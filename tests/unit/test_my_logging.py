"""Tests for logging setup."""

import logging

from rich.logging import RichHandler

from structure_api.my_logging import debug_enabled, setup_logging


def test_debug_enabled_from_env(monkeypatch):
    monkeypatch.setenv("STRUCTURE_DEBUG", "1")
    assert debug_enabled() is True

    monkeypatch.setenv("STRUCTURE_DEBUG", "off")
    assert debug_enabled() is False


def test_setup_logging_levels(monkeypatch):
    monkeypatch.delenv("STRUCTURE_DEBUG", raising=False)
    logger = logging.getLogger("structure_api")

    assert setup_logging() is False
    assert logger.level == logging.INFO

    assert setup_logging(debug=True) is True
    assert logger.level == logging.DEBUG


def test_setup_logging_adds_single_handler():
    setup_logging(debug=False)
    setup_logging(debug=False)

    handlers = [h for h in logging.getLogger("structure_api").handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
