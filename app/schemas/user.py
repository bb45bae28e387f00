# app/schemas/user.py
from datetime import date
from typing import List, Optional

from pydantic import EmailStr, Field, model_validator

from models.user import User
from schemas.validators import (
    Login,
    OptionalRuAlpha,
    Password,
    Phone,
    RequestModel,
    RuPrintableASCII,
    Username,
)


class UserCreate(RequestModel):
    """Схема для создания сотрудника"""
    username: Username
    password: Password
    role_id: int

    def to_model(self) -> User:
        return User(username=self.username, password=self.password, role_id=self.role_id)


class UserUpdate(RequestModel):
    """Схема для обновления сотрудника"""
    email: EmailStr
    phone: Phone
    active: bool = False
    surname: OptionalRuAlpha = Field(default="", max_length=255)
    name: OptionalRuAlpha = Field(default="", max_length=255)
    patronymic: OptionalRuAlpha = Field(default="", max_length=255)
    sex: OptionalRuAlpha = ""
    birth_date: Optional[date] = None
    profession: RuPrintableASCII = ""
    info: RuPrintableASCII = ""
    role_id: Optional[int] = None
    departments: List[int] = []
    services: List[int] = []

    def to_model(self, owner: bool) -> User:
        """
        Создает модель сотрудника из запроса.

        Без прав владельца в модель попадают только личные данные,
        остальные поля запроса игнорируются.
        """
        user = User(
            email=self.email,
            phone=self.phone,
            surname=self.surname,
            name=self.name,
            patronymic=self.patronymic,
            sex=self.sex,
            birth_date=self.birth_date,
        )
        if owner:
            user.active = self.active
            user.profession = self.profession
            user.info = self.info
            user.role_id = self.role_id
        return user


class PasswordUpdate(RequestModel):
    """
    Схема смены пароля.

    Новый пароль должен отличаться от старого и совпадать с подтверждением.
    """
    old_password: Password
    new_password: Password
    confirm_password: Password

    @model_validator(mode="after")
    def check_passwords(self) -> "PasswordUpdate":
        if self.new_password == self.old_password:
            raise ValueError("newPassword must differ from oldPassword")
        if self.new_password != self.confirm_password:
            raise ValueError("newPassword must match confirmPassword")
        return self


class UserSignIn(RequestModel):
    """Схема для входа: логин, e-mail или телефон и пароль"""
    login: Login
    password: Password
