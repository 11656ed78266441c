from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    PROJECT_NAME: str = "Explore With Me API"
    API_PREFIX: str = ""
    ENVIRONMENT: str = "local"
    LOG_LEVEL: str = "INFO"
    # Храним БД в корне проекта, чтобы при запуске из любого каталога использовать один файл
    DATABASE_URL: str = "sqlite:///../explore_with_me.db"
    # Имя приложения, под которым публичные эндпоинты пишут хиты в статистику
    STATS_APP_NAME: str = "ewm-main-service"
    RATE_LIMIT_STORAGE_URL: str = "memory://"
    HIT_RATE_LIMIT: str = "1000/minute"
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, value: List[str] | str) -> List[str]:
        """Allow both comma-separated strings and list inputs."""
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
