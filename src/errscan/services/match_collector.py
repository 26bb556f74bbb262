"""Потокобезопасная коллекция найденных строк."""

from __future__ import annotations

import threading


class MatchCollector:
    """Общий для всех воркеров список найденных строк.

    Любая мутация выполняется под одним ``threading.Lock``; блокировка
    держится только на время append/инкремента.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._lines: list[str] = []
        self._skipped = 0

    def append(self, line: str) -> None:
        with self._lock:
            self._lines.append(line)

    def record_skipped(self) -> None:
        """Учесть строку, совпавшую с паттерном, но без разбираемого timestamp."""
        with self._lock:
            self._skipped += 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)

    @property
    def skipped_count(self) -> int:
        with self._lock:
            return self._skipped

    def snapshot(self) -> list[str]:
        """Копия накопленных строк (порядок не гарантирован)."""
        with self._lock:
            return list(self._lines)
