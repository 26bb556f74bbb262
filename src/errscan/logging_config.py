"""Настройка логирования для errscan."""

import logging
import sys


def setup_logging(level: str = "WARNING") -> None:
    """Настроить корневой логгер.

    Логи пишутся в stderr: stdout зарезервирован под строку результата
    проверки, которую читает планировщик мониторинга.

    Args:
        level: Имя уровня логирования (DEBUG, INFO, WARNING, ERROR).
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(numeric_level)
    # Повторный вызов не должен дублировать обработчики
    root.handlers.clear()
    root.addHandler(handler)
