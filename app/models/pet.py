# app/models/pet.py
from typing import Optional, TYPE_CHECKING
from sqlmodel import Field, Relationship, SQLModel
from models.base import BaseTable

if TYPE_CHECKING:
    from models.client import Client


class PetBase(SQLModel):
    """Базовая модель питомца"""
    name: str = Field(default="", max_length=255)
    type: str = Field(default="", max_length=255)
    breed: str = Field(default="", max_length=255)
    colour: str = Field(default="", max_length=255)
    sex: str = Field(default="", max_length=255)
    client_id: Optional[int] = Field(default=None, foreign_key="clients.id", index=True)


class Pet(PetBase, BaseTable, table=True):
    """Модель питомца для БД"""
    __tablename__ = "pets"

    client: Optional["Client"] = Relationship(back_populates="pets")
