"""Общие перечисления."""

from __future__ import annotations

from enum import Enum


class ScanStatus(str, Enum):
    """Итоговый статус проверки в терминах систем мониторинга."""

    OK = "OK"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"
    UNKNOWN = "UNKNOWN"

    @property
    def exit_code(self) -> int:
        """Код выхода процесса для планировщика мониторинга."""
        return _EXIT_CODES[self]


_EXIT_CODES: dict[ScanStatus, int] = {
    ScanStatus.OK: 0,
    ScanStatus.WARNING: 1,
    ScanStatus.CRITICAL: 2,
    ScanStatus.UNKNOWN: 3,
}
