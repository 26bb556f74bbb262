"""Точка входа CLI для проверки errscan."""

from __future__ import annotations

import argparse
import logging
import sys

from errscan import __version__
from errscan.models.common import ScanStatus

logger = logging.getLogger(__name__)

_DESCRIPTION = """\
Ищет строку ошибки в лог-файле и сравнивает число совпадений за последние
N секунд с порогами warning/critical.

Для ротируемых файлов задайте директорию через -p и шаблон имени через -l:
'2006-01-02' в шаблоне заменяется текущей датой (YYYY-MM-DD), например
-l 'ExampleLogFile-2006-01-02.log'.

Метки времени в логе трактуются в локальной зоне хоста.
"""


class _CheckArgumentParser(argparse.ArgumentParser):
    """Ошибки аргументов завершают процесс со статусом UNKNOWN, а не 2 (CRITICAL)."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(ScanStatus.UNKNOWN.exit_code, f"UNKNOWN: {self.prog}: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _CheckArgumentParser(
        prog="errscan",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-p", "--path",
        required=True,
        help="Путь к лог-файлу (или директория, если задан --log-pattern)",
    )
    parser.add_argument(
        "-e", "--error",
        required=True,
        help="Строка ошибки для поиска (без учёта регистра)",
    )
    parser.add_argument(
        "-c", "--critical",
        type=int,
        required=True,
        help="Порог числа ошибок для CRITICAL",
    )
    parser.add_argument(
        "-w", "--warning",
        type=int,
        required=True,
        help="Порог числа ошибок для WARNING",
    )
    parser.add_argument(
        "-t", "--time-point",
        type=int,
        default=None,
        help="Окно поиска в секундах от текущего момента (переопределяет ERRSCAN_TIME_POINT)",
    )
    parser.add_argument(
        "-l", "--log-pattern",
        default=None,
        help="Шаблон имени лог-файла с плейсхолдером даты, например 'SpamCop-2006-01-02.log'",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Уровень логирования (переопределяет ERRSCAN_LOG_LEVEL)",
    )
    parser.add_argument(
        "--output-format",
        choices=["text", "json"],
        default="text",
        help="Формат вывода (по умолчанию: text)",
    )
    parser.add_argument(
        "--show-lines",
        type=int,
        default=None,
        help="Сколько найденных строк вывести под статусом (переопределяет ERRSCAN_SHOW_LINES)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"errscan {__version__}",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Собрать конфигурацию, выполнить сканирование, вывести результат.

    Единственное место, где ошибки превращаются в код выхода.
    """
    from pydantic import ValidationError

    from errscan.config import Settings
    from errscan.exceptions import ConfigurationError, ErrscanError, LogFileError
    from errscan.logging_config import setup_logging
    from errscan.models.scan import ScanConfig
    from errscan.services.scan_service import ScanService
    from errscan.utils.path_pattern import resolve_log_path

    # 1. Настройки
    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"UNKNOWN: Ошибка конфигурации окружения: {exc}")
        return ScanStatus.UNKNOWN.exit_code

    # 2. Логирование
    setup_logging(args.log_level or settings.log_level)

    # 3. Параметры сканирования
    time_point = args.time_point if args.time_point is not None else settings.time_point
    file_path = resolve_log_path(args.path, args.log_pattern)
    try:
        config = ScanConfig(
            file_path=file_path,
            error_pattern=args.error,
            warning=args.warning,
            critical=args.critical,
            time_point=time_point,
        )
    except ConfigurationError as exc:
        logger.error("Ошибка конфигурации: %s", exc)
        print(f"UNKNOWN: {exc}")
        return ScanStatus.UNKNOWN.exit_code

    # 4. Сканирование
    try:
        report = ScanService().scan(config)
    except LogFileError as exc:
        logger.error("Ошибка чтения лог-файла: %s", exc)
        print(f"UNKNOWN: Cannot read log file {exc}")
        return ScanStatus.UNKNOWN.exit_code
    except ErrscanError as exc:
        logger.error("Ошибка: %s", exc)
        print(f"UNKNOWN: {exc}")
        return ScanStatus.UNKNOWN.exit_code
    except KeyboardInterrupt:
        logger.info("Прервано пользователем")
        return 130
    except Exception as exc:
        logger.exception("Непредвиденная ошибка сканирования")
        print(f"UNKNOWN: Unexpected error while scanning {config.file_path}: {exc}")
        return ScanStatus.UNKNOWN.exit_code

    # 5. Вывод
    if args.output_format == "json":
        print(report.model_dump_json(indent=2))
    else:
        show_lines = args.show_lines if args.show_lines is not None else settings.show_lines
        _print_text_report(report, show_lines)

    return report.status.exit_code


def _print_text_report(report: ScanReport, show_lines: int = 0) -> None:  # noqa: F821
    """Вывод однострочного результата проверки в stdout."""
    print(format_status_line(report))
    for line in report.matched_lines[:show_lines]:
        print(f"  {line}")


def format_status_line(report: ScanReport) -> str:  # noqa: F821
    """Строка статуса в формате плагинов мониторинга."""
    if report.status is ScanStatus.OK and report.match_count == 0:
        return f"OK: Errors not found in log file {report.file_path}!"

    line = (
        f'{report.status.value}: {report.match_count} errors "{report.error_pattern}" '
        f"were found in the log file {report.file_path} "
        f"for the last {report.time_point} sec"
    )
    if report.status is ScanStatus.OK:
        return line
    return line + "!"


def main() -> None:
    """Синхронная точка входа для CLI."""
    parser = build_parser()
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
