# app/auth/session.py
import json
import logging
import secrets
from functools import lru_cache
from typing import Optional

from fastapi import Request
from pydantic import BaseModel, ValidationError

from database.config import get_settings
from database.database import get_redis_client

logger = logging.getLogger(__name__)

# Ключ данных авторизации в сессии
PRINCIPAL_KEY = "principal"
SESSION_ID_KEY = "sid"


class Principal(BaseModel):
    """Минимальные данные вошедшего сотрудника, хранимые в сессии"""
    user_id: int
    role: str = ""


class SessionStore:
    """Интерфейс хранилища сессий"""

    def get_principal(self, request: Request) -> Optional[Principal]:
        raise NotImplementedError

    def set_principal(self, request: Request, principal: Principal) -> None:
        raise NotImplementedError

    def clear(self, request: Request) -> None:
        raise NotImplementedError


class CookieSessionStore(SessionStore):
    """
    Хранит данные авторизации в подписанной cookie (SessionMiddleware).

    Cookie переотправляется с каждым ответом, поэтому срок жизни
    продлевается автоматически.
    """

    def get_principal(self, request: Request) -> Optional[Principal]:
        data = request.session.get(PRINCIPAL_KEY)
        if not data:
            return None
        try:
            return Principal.model_validate(data)
        except ValidationError:
            logger.warning("Некорректные данные авторизации в сессии")
            return None

    def set_principal(self, request: Request, principal: Principal) -> None:
        request.session[PRINCIPAL_KEY] = principal.model_dump()

    def clear(self, request: Request) -> None:
        request.session.clear()


class RedisSessionStore(SessionStore):
    """
    Хранит данные авторизации в Redis.

    В cookie лежит только случайный идентификатор сессии, данные хранятся
    под ключом session:<id> с TTL, который обновляется при каждой записи.
    """

    def __init__(self, client, max_age: int):
        self.redis = client
        self.max_age = max_age

    @staticmethod
    def _key(session_id: str) -> str:
        return f"session:{session_id}"

    def get_principal(self, request: Request) -> Optional[Principal]:
        session_id = request.session.get(SESSION_ID_KEY)
        if not session_id:
            return None
        raw = self.redis.get(self._key(session_id))
        if raw is None:
            return None
        try:
            return Principal.model_validate(json.loads(raw))
        except (ValueError, ValidationError):
            logger.warning(f"Некорректные данные сессии {session_id} в Redis")
            return None

    def set_principal(self, request: Request, principal: Principal) -> None:
        session_id = request.session.get(SESSION_ID_KEY)
        if not session_id:
            session_id = secrets.token_urlsafe(32)
            request.session[SESSION_ID_KEY] = session_id
        self.redis.setex(self._key(session_id), self.max_age, principal.model_dump_json())

    def clear(self, request: Request) -> None:
        session_id = request.session.get(SESSION_ID_KEY)
        if session_id:
            self.redis.delete(self._key(session_id))
        request.session.clear()


@lru_cache()
def get_session_store() -> SessionStore:
    """Выбор хранилища сессий по настройкам приложения"""
    settings = get_settings()
    if settings.REDIS_ENABLED:
        client = get_redis_client()
        if client is not None:
            logger.info("Сессии хранятся в Redis")
            return RedisSessionStore(client, settings.SESSION_MAX_AGE)
    logger.info("Сессии хранятся в cookie")
    return CookieSessionStore()
