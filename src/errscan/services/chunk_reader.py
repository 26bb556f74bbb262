"""Чтение лог-файла чанками и параллельная раздача чанков обработчику.

Чанк — последовательность байт до символа ``\\n`` включительно (или до EOF).
Файл никогда не загружается в память целиком: читатель держит не больше
``concurrency`` необработанных чанков одновременно.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from concurrent.futures import Future, ThreadPoolExecutor
from typing import BinaryIO

from errscan.exceptions import LogFileError

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY = 5


def iter_chunks(handle: BinaryIO) -> Iterator[bytes]:
    """Отдавать строки файла как байтовые чанки до EOF.

    Последний чанк может не заканчиваться ``\\n``. Пустой файл не даёт
    ни одного чанка.
    """
    while True:
        chunk = handle.readline()
        if not chunk:
            return
        yield chunk


class ChunkDispatcher:
    """Раздаёт чанки в пул потоков с ограничением числа задач в полёте.

    Перед отправкой каждого чанка читатель захватывает слот семафора
    (блокируется, если все слоты заняты); слот освобождается по завершении
    задачи. Завершения обработки чанка читатель не ждёт — только свободного
    слота. ``dispatch`` возвращает управление после завершения всех задач.
    """

    def __init__(self, concurrency: int = DEFAULT_CONCURRENCY) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        self._concurrency = concurrency

    @property
    def concurrency(self) -> int:
        return self._concurrency

    def dispatch(
        self,
        handle: BinaryIO,
        handler: Callable[[bytes], None],
        *,
        source: str = "<stream>",
    ) -> int:
        """Прочитать ``handle`` до конца и обработать каждый чанк в пуле.

        Returns:
            Количество отправленных на обработку чанков.

        Raises:
            LogFileError: ошибка чтения. Новые чанки больше не отправляются,
                уже запущенные задачи дорабатывают до конца.
        """
        semaphore = threading.BoundedSemaphore(self._concurrency)
        failures: list[BaseException] = []
        dispatched = 0

        def on_done(future: Future) -> None:
            semaphore.release()
            exc = future.exception()
            if exc is not None:
                failures.append(exc)

        with ThreadPoolExecutor(
            max_workers=self._concurrency,
            thread_name_prefix="errscan-chunk",
        ) as executor:
            try:
                for chunk in iter_chunks(handle):
                    semaphore.acquire()
                    executor.submit(handler, chunk).add_done_callback(on_done)
                    dispatched += 1
            except OSError as exc:
                logger.error("Ошибка чтения %s после %d чанков: %s", source, dispatched, exc)
                raise LogFileError(source, str(exc)) from exc

        if failures:
            raise failures[0]

        logger.debug("Обработано чанков: %d (параллелизм=%d)", dispatched, self._concurrency)
        return dispatched
