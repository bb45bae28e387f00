# app/models/category.py
from typing import List, TYPE_CHECKING
from sqlmodel import Field, Relationship, SQLModel
from models.base import BaseTable

if TYPE_CHECKING:
    from models.service import Service


class CategoryBase(SQLModel):
    """Базовая модель категории услуг"""
    name: str = Field(max_length=255, unique=True)


class Category(CategoryBase, BaseTable, table=True):
    """Модель категории для БД"""
    __tablename__ = "categories"

    services: List["Service"] = Relationship(back_populates="category")
