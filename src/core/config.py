"""
Configuration — настройки через переменные окружения (pydantic-settings).

Инварианты:
    - Все параметры имеют значения по умолчанию: пакет работает без .env
    - get_settings() кэшируется (lru_cache), один экземпляр на процесс

Переменные окружения (префикс NUMERIC_DRILLS_):
    NUMERIC_DRILLS_DIVISION_BY_ZERO=ieee|raise
    NUMERIC_DRILLS_LOG_LEVEL=WARNING
    NUMERIC_DRILLS_LOG_FORMAT=text|json
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки калькулятора и логирования."""

    model_config = SettingsConfigDict(
        env_prefix="NUMERIC_DRILLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Деление на ноль: ieee → ±inf/nan, raise → DivisionByZero
    division_by_zero: Literal["ieee", "raise"] = Field(
        default="ieee",
        description="Division-by-zero policy of the calculator",
    )

    # Observability
    log_level: str = Field(default="WARNING", description="Root log level")
    log_format: Literal["text", "json"] = Field(default="text", description="Log formatter")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def strict_division(self) -> bool:
        return self.division_by_zero == "raise"


@lru_cache
def get_settings() -> Settings:
    return Settings()
