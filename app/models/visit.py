# app/models/visit.py
from datetime import datetime
from typing import Optional, TYPE_CHECKING
from sqlmodel import Field, Relationship, SQLModel
from models.base import BaseTable

if TYPE_CHECKING:
    from models.client import Client
    from models.pet import Pet
    from models.service import Service
    from models.user import User


class VisitBase(SQLModel):
    """Базовая модель приема"""
    date_time: Optional[datetime] = Field(default=None)
    info: str = Field(default="")
    client_id: Optional[int] = Field(default=None, foreign_key="clients.id")
    pet_id: Optional[int] = Field(default=None, foreign_key="pets.id")
    doctor_id: Optional[int] = Field(default=None, foreign_key="users.id")
    service_id: Optional[int] = Field(default=None, foreign_key="services.id")
    last_updated_by_id: Optional[int] = Field(default=None, foreign_key="users.id")


class Visit(VisitBase, BaseTable, table=True):
    """Модель приема для БД"""
    __tablename__ = "visits"

    # Связи
    client: Optional["Client"] = Relationship()
    pet: Optional["Pet"] = Relationship()
    doctor: Optional["User"] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "Visit.doctor_id"}
    )
    service: Optional["Service"] = Relationship()
    last_updated_by: Optional["User"] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "Visit.last_updated_by_id"}
    )
