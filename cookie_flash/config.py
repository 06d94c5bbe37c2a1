import os
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# 1. Сначала определяем имя env-файла (ДО класса)
app_mode = os.getenv("APP_MODE", "dev")  # берем из системы или ставим 'dev'
env_file_name = f".env.{app_mode}"

# Имя куки по умолчанию
DEFAULT_COOKIE_NAME = "_flash"


class Settings(BaseSettings):
    # Основное
    PROJECT_NAME: str = "CookieFlash"
    VERSION: str = "0.1.0"

    # Flash-кука: имя фиксируется при создании middleware
    FLASH_COOKIE_NAME: str = DEFAULT_COOKIE_NAME

    # Логи: файл пишем только если папка задана явно
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=env_file_name,
        env_file_encoding='utf-8',
        extra='ignore'
    )


# Создаем экземпляр для импорта в другие модули
settings = Settings()
