"""Число найденных строк → статус проверки."""

from __future__ import annotations

from errscan.models.common import ScanStatus


def resolve_status(count: int, *, warning: int, critical: int) -> ScanStatus:
    """Сопоставить количество ошибок с порогами.

    Пороги — включительные нижние границы. CRITICAL проверяется первым,
    поэтому при ``warning == critical == count`` результат CRITICAL.
    """
    if count >= critical:
        return ScanStatus.CRITICAL
    if count >= warning:
        return ScanStatus.WARNING
    return ScanStatus.OK
