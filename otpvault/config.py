"""
Конфигурация otpvault

Значения читаются из переменных окружения с префиксом OTPVAULT_ и из .env
"""
from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache

from .models import MAX_PERIOD, MIN_PERIOD


class Settings(BaseSettings):
    """Настройки приложения"""

    # Application
    APP_NAME: str = "otpvault"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"  # пустая строка - только консоль
    LOG_FILE: str = "otpvault.log"
    LOG_COLORS: bool = True
    LOG_MAX_BYTES: int = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT: int = 5

    # andOTP
    STEAM_DEFAULT_PERIOD: int = Field(30, ge=MIN_PERIOD, le=MAX_PERIOD)

    class Config:
        env_prefix = "OTPVAULT_"
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Получить настройки приложения (кэшируется)"""
    return Settings()
