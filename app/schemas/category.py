# app/schemas/category.py
from pydantic import Field

from models.category import Category
from schemas.validators import RequestModel, RuPrintableASCII


class CategoryIn(RequestModel):
    """Схема создания и обновления категории услуг"""
    name: RuPrintableASCII = Field(min_length=1)

    def to_model(self) -> Category:
        return Category(name=self.name)
