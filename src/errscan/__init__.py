"""errscan — поиск ошибок в лог-файле для систем мониторинга."""

__version__ = "0.1.0"
