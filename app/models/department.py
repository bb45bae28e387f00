# app/models/department.py
from typing import List, TYPE_CHECKING
from sqlmodel import Field, Relationship, SQLModel
from models.base import BaseTable
from models.links import DepartmentServiceLink, UserDepartmentLink

if TYPE_CHECKING:
    from models.service import Service
    from models.user import User


class DepartmentBase(SQLModel):
    """Базовая модель отделения"""
    name: str = Field(max_length=255, unique=True)
    slug: str = Field(default="", max_length=255, unique=True, index=True)


class Department(DepartmentBase, BaseTable, table=True):
    """Модель отделения для БД"""
    __tablename__ = "departments"

    # Связи
    users: List["User"] = Relationship(back_populates="departments", link_model=UserDepartmentLink)
    services: List["Service"] = Relationship(
        back_populates="departments", link_model=DepartmentServiceLink
    )
