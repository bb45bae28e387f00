# app/database/database.py
from sqlmodel import Session, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import NullPool
from typing import Generator, Optional
import redis
from .config import get_settings
import logging

logger = logging.getLogger(__name__)


def get_database_engine() -> Engine:
    """
    Создание и настройка движка SQLAlchemy.

    Returns:
        Engine: Настроенный движок SQLAlchemy
    """
    settings = get_settings()

    if settings.DB_DIALECT == "sqlite":
        # Запросы выполняются в потоках FastAPI, поэтому отключаем проверку потока
        engine = create_engine(
            url=settings.DATABASE_URL,
            echo=settings.SQL_ECHO,
            connect_args={"check_same_thread": False},
        )
    elif settings.DEBUG:
        # В режиме отладки используем NullPool (без пулинга)
        engine = create_engine(
            url=settings.DATABASE_URL,
            echo=settings.SQL_ECHO,
            poolclass=NullPool
        )
    else:
        engine = create_engine(
            url=settings.DATABASE_URL,
            echo=settings.SQL_ECHO,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600
        )

    return engine


def get_redis_client() -> Optional[redis.Redis]:
    """
    Получение клиента Redis для хранения сессий.

    Returns:
        redis.Redis: Клиент Redis или None если Redis выключен или недоступен
    """
    settings = get_settings()
    if not settings.REDIS_ENABLED:
        return None

    try:
        client = redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            max_connections=settings.REDIS_POOL_SIZE,
            socket_connect_timeout=5,
            socket_timeout=5
        )
        # Проверяем соединение
        client.ping()
        logger.info(f"Redis подключен успешно: {settings.REDIS_HOST}:{settings.REDIS_PORT}")
        return client
    except redis.RedisError as e:
        logger.warning(f"Redis недоступен: {e}. Сессии будут храниться в cookie.")
        return None


# Глобальный движок
engine = get_database_engine()


def get_session() -> Generator[Session, None, None]:
    """Получение сессии базы данных"""
    with Session(engine) as session:
        yield session
