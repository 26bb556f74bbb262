"""Общие фабрики и фикстуры для тестов errscan."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from errscan.models.scan import ScanConfig

# Фиксированный "текущий" момент: 5 января, 10:05:00 (локальное время)
NOW = datetime(2026, 1, 5, 10, 5, 0)


def fixed_clock(now: datetime = NOW):
    """Часы, всегда возвращающие ``now`` в локальной зоне."""
    aware = now.astimezone()
    return lambda: aware


def syslog_ts(moment: datetime) -> str:
    """Метка времени в формате ``Mon Day HH:MM:SS`` без ведущего нуля в дне."""
    return f"{moment.strftime('%b')} {moment.day} {moment.strftime('%H:%M:%S')}"


def ago(seconds: int, now: datetime = NOW) -> str:
    return syslog_ts(now - timedelta(seconds=seconds))


def write_log(tmp_path: Path, lines: list[str], *, name: str = "app.log", trailing_newline: bool = True) -> Path:
    """Записать строки лога в файл и вернуть путь."""
    path = tmp_path / name
    content = "\n".join(lines)
    if trailing_newline and lines:
        content += "\n"
    path.write_text(content, encoding="utf-8")
    return path


def make_scan_config(**overrides) -> ScanConfig:
    """Фабрика ScanConfig с разумными дефолтами."""
    defaults: dict = {
        "file_path": "app.log",
        "error_pattern": "error",
        "warning": 1,
        "critical": 2,
        "time_point": 3600,
    }
    defaults.update(overrides)
    defaults["file_path"] = str(defaults["file_path"])
    return ScanConfig(**defaults)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging() перенастраивает корневой логгер — вернуть как было."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
