"""Тесты загрузки Settings из переменных окружения."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from errscan.config import Settings


def test_settings_defaults_are_applied(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)  # изоляция от .env в корне проекта
    for name in ("ERRSCAN_LOG_LEVEL", "ERRSCAN_TIME_POINT", "ERRSCAN_SHOW_LINES"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.log_level == "WARNING"
    assert settings.time_point == 0
    assert settings.show_lines == 0


def test_settings_loads_from_env_vars(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ERRSCAN_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ERRSCAN_TIME_POINT", "600")
    monkeypatch.setenv("ERRSCAN_SHOW_LINES", "5")

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.time_point == 600
    assert settings.show_lines == 5


def test_settings_reads_dotenv_file(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ERRSCAN_TIME_POINT", raising=False)
    (tmp_path / ".env").write_text("ERRSCAN_TIME_POINT=120\n", encoding="utf-8")

    assert Settings().time_point == 120


def test_negative_time_point_is_rejected(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ERRSCAN_TIME_POINT", "-1")

    with pytest.raises(ValidationError):
        Settings()
