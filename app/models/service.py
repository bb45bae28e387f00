# app/models/service.py
from typing import List, Optional, TYPE_CHECKING
from sqlmodel import Field, Relationship, SQLModel
from models.base import BaseTable
from models.links import DepartmentServiceLink, UserServiceLink

if TYPE_CHECKING:
    from models.category import Category
    from models.department import Department
    from models.user import User


class ServiceBase(SQLModel):
    """Базовая модель услуги клиники"""
    name: str = Field(max_length=255, unique=True)
    price: float = Field(default=0)
    category_id: Optional[int] = Field(default=None, foreign_key="categories.id")


class Service(ServiceBase, BaseTable, table=True):
    """Модель услуги для БД"""
    __tablename__ = "services"

    # Связи
    category: Optional["Category"] = Relationship(back_populates="services")
    users: List["User"] = Relationship(back_populates="services", link_model=UserServiceLink)
    departments: List["Department"] = Relationship(
        back_populates="services", link_model=DepartmentServiceLink
    )
