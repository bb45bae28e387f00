# app/routes/users.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from sqlmodel import Session

from auth.authenticate import (
    authenticate,
    get_current_user,
    make_principal,
    require_superuser,
    require_owner,
    require_user,
)
from auth.session import get_session_store
from database.database import get_session
from exceptions import VetClinicError
from models.read import UserRead
from models.user import User
from schemas.user import PasswordUpdate, UserCreate, UserSignIn, UserUpdate
from services import UserService

router = APIRouter(tags=["users"])


@router.post("/login", response_model=UserRead)
async def login(
        data: UserSignIn,
        request: Request,
        current_user: Optional[User] = Depends(get_current_user),
        session: Session = Depends(get_session)
):
    """
    Вход по имени пользователя, e-mail или телефону.

    Если сотрудник уже вошел, возвращается его профиль без проверки пароля.
    """
    if current_user is not None:
        return current_user

    try:
        user = UserService(session).login(data.login, data.password)
    except VetClinicError as e:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": e.message}
        )

    get_session_store().set_principal(request, make_principal(user))
    return user


@router.post("/logout")
async def logout(request: Request, user: User = Depends(authenticate)):
    """Завершение сессии"""
    get_session_store().clear(request)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/profile", response_model=UserRead)
async def get_profile(user: User = Depends(require_user)):
    return user


@router.put("/profile", response_model=UserRead)
async def update_profile(
        data: UserUpdate,
        user: User = Depends(require_user),
        session: Session = Depends(get_session)
):
    """
    Обновление собственного профиля.

    Поля, доступные только владельцу (роль, активность, отделения и т.д.),
    игнорируются.
    """
    return UserService(session).update(str(user.id), data.to_model(owner=False), owner=False)


@router.put("/profile/password", response_model=UserRead)
async def update_password(
        data: PasswordUpdate,
        user: User = Depends(require_user),
        session: Session = Depends(get_session)
):
    return UserService(session).update_password(user.id, data.old_password, data.new_password)


@router.get("/users", response_model=List[UserRead])
async def get_users(
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return UserService(session).get_all()


@router.get("/users/{user_id}", response_model=UserRead)
async def get_user(
        user_id: str,
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    """Получить сотрудника по id или slug"""
    return UserService(session).get(user_id)


@router.post("/users", response_model=UserRead)
async def create_user(
        data: UserCreate,
        user: User = Depends(require_owner),
        session: Session = Depends(get_session)
):
    return UserService(session).create(data.to_model())


@router.put("/users/{user_id}", response_model=UserRead)
async def update_user(
        user_id: str,
        data: UserUpdate,
        user: User = Depends(require_owner),
        session: Session = Depends(get_session)
):
    return UserService(session).update(
        user_id,
        data.to_model(owner=True),
        owner=True,
        department_ids=data.departments,
        service_ids=data.services,
    )


@router.delete("/users/{user_id}", response_model=UserRead)
async def delete_user(
        user_id: str,
        user: User = Depends(require_superuser),
        session: Session = Depends(get_session)
):
    return UserService(session).delete(user_id)
