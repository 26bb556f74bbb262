"""Конфигурация приложения, загружаемая из переменных окружения."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Конфигурация errscan.

    Значения задаются через переменные окружения с префиксом ``ERRSCAN_``
    или через файл ``.env`` в рабочей директории. Флаги CLI имеют приоритет.
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRSCAN_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(default="WARNING", description="Уровень логирования")
    time_point: int = Field(
        default=0, ge=0,
        description="Окно поиска ошибок в секундах, если флаг -t не задан",
    )
    show_lines: int = Field(
        default=0, ge=0,
        description="Сколько найденных строк печатать под строкой статуса (text-вывод)",
    )
