"""Имена ротируемых лог-файлов с датой в названии."""

from __future__ import annotations

import os
from datetime import date

# Плейсхолдер даты в шаблоне имени файла, заменяется на YYYY-MM-DD
DATE_PLACEHOLDER = "2006-01-02"


def resolve_log_path(path: str, log_pattern: str | None, today: date | None = None) -> str:
    """Получить путь к лог-файлу.

    Без шаблона ``path`` возвращается как есть. С шаблоном ``path``
    трактуется как директория, а первое вхождение ``DATE_PLACEHOLDER``
    в шаблоне заменяется текущей датой.

    >>> resolve_log_path("/var/log", "SpamCop-2006-01-02.log", date(2024, 3, 7))
    '/var/log/SpamCop-2024-03-07.log'
    """
    if not log_pattern:
        return path
    today = today or date.today()
    filename = log_pattern.replace(DATE_PLACEHOLDER, today.strftime("%Y-%m-%d"), 1)
    return os.path.join(path, filename)
