# app/models/lead.py
from typing import Optional, TYPE_CHECKING
from sqlmodel import Field, Relationship, SQLModel
from models.base import BaseTable

if TYPE_CHECKING:
    from models.user import User

# Справочники классификации заявок
LEAD_TYPES = ["in_clinic", "online", "callback"]
LEAD_STATUSES = ["open", "in_progress", "closed", "rejected"]
LEAD_STATUS_OPEN = "open"


class LeadBase(SQLModel):
    """Базовая модель заявки"""
    name: str = Field(default="", max_length=255)
    phone: str = Field(default="")
    email: str = Field(default="")
    comment: str = Field(default="")
    type: str = Field(default="")
    status: str = Field(default="")
    doctor_id: Optional[int] = Field(default=None, foreign_key="users.id")
    last_updated_by_id: Optional[int] = Field(default=None, foreign_key="users.id")


class Lead(LeadBase, BaseTable, table=True):
    """Модель заявки для БД"""
    __tablename__ = "leads"

    # Связи
    doctor: Optional["User"] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "Lead.doctor_id"}
    )
    last_updated_by: Optional["User"] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "Lead.last_updated_by_id"}
    )
