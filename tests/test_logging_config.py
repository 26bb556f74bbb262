"""Тесты настройки логирования."""

from __future__ import annotations

import logging

from errscan.logging_config import setup_logging


def test_repeated_setup_keeps_single_handler() -> None:
    setup_logging("DEBUG")
    setup_logging("INFO")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.INFO


def test_unknown_level_falls_back_to_warning() -> None:
    setup_logging("chatty")
    assert logging.getLogger().level == logging.WARNING
