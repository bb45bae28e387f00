# app/database/config.py
import os
from functools import lru_cache
from typing import Optional, Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

# Файл конфигурации выбирается переменной окружения VET_CLINIC_ENV
CONFIG_PATH = "config/{env}.yml"


class Settings(BaseSettings):
    # Настройки базы данных
    DB_DIALECT: str = "sqlite"
    DB_HOST: str = "sqlite.db"
    DB_PORT: int = 5432
    DB_NAME: str = "vet_clinic"
    DB_USER: str = "postgres"
    DB_PASS: str = "postgres"
    DB_MIGRATION: bool = False  # Пересоздание схемы при запуске

    # Настройки Redis для хранения сессий
    REDIS_ENABLED: bool = False
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_POOL_SIZE: int = 10

    # Расширения
    MASTER_GENERATOR: bool = False
    SECURITY_ENABLED: bool = False
    CORS_ENABLED: bool = False
    STATIC_ENABLED: bool = False
    STATIC_DIR: str = "assets"
    SWAGGER_ENABLED: bool = False
    SWAGGER_PATH: str = "/swagger"

    # Настройки приложения
    APP_NAME: str = "Vet Clinic API"
    APP_DESCRIPTION: str = "API административной системы ветеринарной клиники"
    API_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Настройки безопасности
    SECRET_KEY: str = "secret"
    SESSION_COOKIE: str = "Authorization"
    SESSION_MAX_AGE: int = 86400
    PASSWORD_HASH_COST: int = 12

    # Логирование
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    LOG_MAX_BYTES: int = 10 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 5
    SQL_ECHO: bool = False

    @property
    def DATABASE_URL(self) -> str:
        """URL подключения к базе данных для выбранного диалекта"""
        if self.DB_DIALECT == "sqlite":
            return f"sqlite:///{self.DB_HOST}"
        if self.DB_DIALECT == "postgres":
            return (
                f"postgresql+psycopg://{self.DB_USER}:{self.DB_PASS}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
            )
        raise ValueError(f"Unsupported database dialect: {self.DB_DIALECT}")

    @property
    def REDIS_URL(self) -> str:
        """URL подключения к Redis"""
        return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # Переменные окружения важнее YAML-файла
        yaml_file = CONFIG_PATH.format(env=os.getenv("VET_CLINIC_ENV", "develop"))
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file),
        )


@lru_cache()
def get_settings() -> Settings:
    """Получение настроек приложения с кэшированием"""
    return Settings()
