# app/models/client.py
from datetime import date
from typing import List, Optional, TYPE_CHECKING
from sqlmodel import Field, Relationship, SQLModel
from models.base import BaseTable

if TYPE_CHECKING:
    from models.pet import Pet


class ClientBase(SQLModel):
    """Базовая модель клиента (владельца питомца)"""
    surname: str = Field(default="", max_length=255)
    name: str = Field(default="", max_length=255)
    patronymic: str = Field(default="", max_length=255)
    sex: str = Field(default="")
    birth_date: Optional[date] = Field(default=None)
    phone: str = Field(default="")
    email: str = Field(default="")
    info: str = Field(default="")


class Client(ClientBase, BaseTable, table=True):
    """Модель клиента для БД"""
    __tablename__ = "clients"

    pets: List["Pet"] = Relationship(back_populates="client")
