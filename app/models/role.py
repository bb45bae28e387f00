# app/models/role.py
from sqlmodel import Field, SQLModel
from models.base import BaseTable


class RoleBase(SQLModel):
    """Базовая модель роли"""
    name: str = Field(max_length=255, unique=True)


class Role(RoleBase, BaseTable, table=True):
    """Модель роли для БД"""
    __tablename__ = "roles"
