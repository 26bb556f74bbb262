"""Классификация строк чанка: совпадение с ошибкой и попадание во временное окно.

Формат строки лога — syslog-подобный: первые три поля, разделённые
пробелами, образуют метку времени ``Mon Day HH:MM:SS`` без года и зоны.
Год берётся текущий, зона — локальная зона хоста. Поэтому декабрьские
записи, просканированные в январе, получают отрицательный возраст и
попадают в окно: это известное ограничение.
"""

from __future__ import annotations

import logging
from datetime import datetime

from errscan.exceptions import TimestampParseError
from errscan.models.scan import ScanConfig
from errscan.services.match_collector import MatchCollector

logger = logging.getLogger(__name__)

_TS_FIELDS = 3
_TS_FORMAT = "%Y %b %d %H:%M:%S"


def parse_line_timestamp(line: str, now: datetime) -> datetime:
    """Извлечь метку времени из начала строки лога.

    Args:
        line: Строка лога.
        now: Текущий момент (aware); из него берутся год и зона.

    Raises:
        TimestampParseError: меньше трёх полей или метка не разбирается.
    """
    fields = line.split()
    if len(fields) < _TS_FIELDS:
        raise TimestampParseError(line, "invalid log line format")

    candidate = f"{now.year} {' '.join(fields[:_TS_FIELDS])}"
    try:
        naive = datetime.strptime(candidate, _TS_FORMAT)
    except ValueError as exc:
        raise TimestampParseError(line, f"error parsing date: {exc}") from exc
    # Наивное время трактуется как локальное
    return naive.astimezone()


def line_age_seconds(line: str, now: datetime) -> int:
    """Возраст строки в целых секундах (отрицательный для меток из будущего)."""
    return int((now - parse_line_timestamp(line, now)).total_seconds())


class LineClassifier:
    """Проверяет строки чанка и складывает подходящие в ``MatchCollector``.

    Один экземпляр разделяется всеми воркерами сканирования: состояние
    неизменяемо, общая коллекция синхронизирована сама.
    """

    def __init__(self, config: ScanConfig, now: datetime) -> None:
        self._needle = config.error_pattern.lower()
        self._max_age = config.time_point
        self._now = now if now.tzinfo is not None else now.astimezone()

    def is_match(self, line: str) -> bool:
        return self._needle in line.lower()

    def classify_chunk(self, chunk: bytes, collector: MatchCollector) -> None:
        """Обработать один чанк.

        Чанк может содержать несколько строк; разбивается по ``\\n``.
        Ошибки разбора метки времени изолированы на уровне строки.
        """
        text = chunk.decode("utf-8", errors="replace")
        for raw_line in text.split("\n"):
            line = raw_line.rstrip("\r")
            if not self.is_match(line):
                continue

            try:
                age = line_age_seconds(line, self._now)
            except TimestampParseError as exc:
                logger.warning("Строка пропущена: %s", exc)
                collector.record_skipped()
                continue

            if age <= self._max_age:
                collector.append(line)
