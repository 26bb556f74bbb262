"""Модели входных параметров и результата сканирования лог-файла."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field

from errscan.exceptions import ConfigurationError
from errscan.models.common import ScanStatus


@dataclass(frozen=True)
class ScanConfig:
    """Параметры одного сканирования.

    Валидируется при создании: невалидная конфигурация отклоняется
    до того, как файл будет открыт.
    """

    file_path: str
    error_pattern: str
    warning: int
    critical: int
    time_point: int = 0

    def __post_init__(self) -> None:
        if not self.file_path:
            raise ConfigurationError("Не задан путь к лог-файлу")
        if not self.error_pattern:
            raise ConfigurationError("Строка ошибки не может быть пустой")
        for name in ("warning", "critical", "time_point"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"Значение {name} не может быть отрицательным")
        if self.warning > self.critical:
            raise ConfigurationError(
                "Warning number of errors must be less than critical number of errors "
                f"(warning={self.warning}, critical={self.critical})"
            )


class ScanReport(BaseModel):
    """Результат сканирования лог-файла."""

    file_path: str
    error_pattern: str
    time_point: int
    warning: int
    critical: int
    status: ScanStatus
    match_count: int
    skipped_count: int = 0
    chunk_count: int = 0
    matched_lines: list[str] = Field(default_factory=list)
