# app/models/user.py
from datetime import date
from typing import List, Optional, TYPE_CHECKING
from sqlmodel import Field, Relationship, SQLModel
from models.base import BaseTable
from models.links import UserDepartmentLink, UserServiceLink

if TYPE_CHECKING:
    from models.department import Department
    from models.role import Role
    from models.service import Service


class UserBase(SQLModel):
    """Базовая модель сотрудника клиники"""
    username: str = Field(max_length=255, unique=True, index=True)
    email: Optional[str] = Field(default=None, max_length=255, unique=True)
    phone: Optional[str] = Field(default=None, max_length=255, unique=True)
    active: bool = Field(default=False)
    surname: str = Field(default="", max_length=255)
    name: str = Field(default="", max_length=255)
    patronymic: str = Field(default="", max_length=255)
    sex: str = Field(default="")
    birth_date: Optional[date] = Field(default=None)
    profession: str = Field(default="")
    info: str = Field(default="")
    slug: str = Field(default="", max_length=255, index=True)
    role_id: Optional[int] = Field(default=None, foreign_key="roles.id")


class User(UserBase, BaseTable, table=True):
    """Модель сотрудника для БД"""
    __tablename__ = "users"

    # Хранится только bcrypt-хеш, в ответы API не попадает
    password: str = Field(default="")

    # Связи
    role: Optional["Role"] = Relationship()
    departments: List["Department"] = Relationship(
        back_populates="users", link_model=UserDepartmentLink
    )
    services: List["Service"] = Relationship(back_populates="users", link_model=UserServiceLink)
