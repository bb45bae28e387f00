# app/auth/authenticate.py
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from sqlmodel import Session

from auth.access import AccessLevel
from auth.session import Principal, get_session_store
from database.database import get_session
from models.user import User
from repositories.user import UserRepository


async def get_current_user(
        request: Request,
        session: Session = Depends(get_session)
) -> Optional[User]:
    """
    Возвращает сотрудника текущей сессии.

    Сотрудник каждый раз перечитывается из БД, сессия сохраняется заново,
    чтобы продлить срок ее жизни. Если сотрудник удален, запрос считается
    анонимным.

    Returns:
        Optional[User]: Сотрудник или None
    """
    store = get_session_store()
    principal = store.get_principal(request)
    if principal is None:
        return None

    user = UserRepository(session).find(principal.user_id)
    if user is None:
        return None

    store.set_principal(request, make_principal(user))
    return user


def make_principal(user: User) -> Principal:
    return Principal(user_id=user.id, role=user.role.name if user.role else "")


def get_access_level(user: Optional[User]) -> AccessLevel:
    if user is None or user.role is None:
        return AccessLevel.UNAUTHORIZED
    return AccessLevel.from_role_name(user.role.name)


def require_level(level: AccessLevel):
    """
    Создает зависимость, пропускающую сотрудников с уровнем не ниже level.

    Raises:
        HTTPException: 401 без входа в систему, 403 при недостаточном уровне
    """

    async def guard(user: Optional[User] = Depends(get_current_user)) -> User:
        actual = get_access_level(user)
        if not AccessLevel.STAFF.access_allowed(actual):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Sign in for access"
            )
        if not level.access_allowed(actual):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied"
            )
        return user

    return guard


authenticate = require_level(AccessLevel.STAFF)
require_admin = require_level(AccessLevel.ADMINISTRATOR)
require_owner = require_level(AccessLevel.OWNER)
require_superuser = require_level(AccessLevel.SUPERUSER)


async def require_user(user: Optional[User] = Depends(get_current_user)) -> User:
    """Пропускает любого вошедшего сотрудника независимо от роли"""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sign in for access"
        )
    return user
