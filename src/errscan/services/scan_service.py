"""Сервис сканирования: один проход по лог-файлу и расчёт статуса."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from errscan.exceptions import LogFileError
from errscan.models.scan import ScanConfig, ScanReport
from errscan.services.chunk_reader import (
    DEFAULT_CONCURRENCY,
    ChunkDispatcher,
)
from errscan.services.line_classifier import LineClassifier
from errscan.services.match_collector import MatchCollector
from errscan.services.thresholds import resolve_status

logger = logging.getLogger(__name__)

# Размер буфера чтения лог-файла
DEFAULT_BUFFER_SIZE = 64 * 1024


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class ScanContext:
    """Состояние одного сканирования; создаётся на каждый вызов ``scan``."""

    config: ScanConfig
    started_at: datetime
    collector: MatchCollector = field(default_factory=MatchCollector)


class ScanService:
    """Сканирует лог-файл и возвращает ``ScanReport``.

    Фатальные ошибки (файл не открывается или не читается) пробрасываются
    как ``LogFileError``; частичный результат в этом случае не возвращается.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = _local_now,
        concurrency: int = DEFAULT_CONCURRENCY,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> None:
        self._clock = clock
        self._buffer_size = buffer_size
        self._dispatcher = ChunkDispatcher(concurrency=concurrency)

    def scan(self, config: ScanConfig) -> ScanReport:
        context = ScanContext(config=config, started_at=self._clock())
        classifier = LineClassifier(config, context.started_at)

        logger.info(
            "Сканирование %s: ошибка=%r, окно=%d сек, параллелизм=%d",
            config.file_path,
            config.error_pattern,
            config.time_point,
            self._dispatcher.concurrency,
        )

        def handle_chunk(chunk: bytes) -> None:
            classifier.classify_chunk(chunk, context.collector)

        try:
            with open(config.file_path, "rb", buffering=self._buffer_size) as handle:
                chunk_count = self._dispatcher.dispatch(
                    handle, handle_chunk, source=config.file_path,
                )
        except OSError as exc:
            raise LogFileError(config.file_path, exc.strerror or str(exc)) from exc

        matched = context.collector.snapshot()
        status = resolve_status(
            len(matched),
            warning=config.warning,
            critical=config.critical,
        )

        report = ScanReport(
            file_path=config.file_path,
            error_pattern=config.error_pattern,
            time_point=config.time_point,
            warning=config.warning,
            critical=config.critical,
            status=status,
            match_count=len(matched),
            skipped_count=context.collector.skipped_count,
            chunk_count=chunk_count,
            matched_lines=matched,
        )
        self._log_report(report)
        return report

    @staticmethod
    def _log_report(report: ScanReport) -> None:
        logger.info(
            "Итог: %s, найдено %d (пропущено без метки времени: %d, чанков: %d)",
            report.status.value,
            report.match_count,
            report.skipped_count,
            report.chunk_count,
        )
