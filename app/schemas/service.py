# app/schemas/service.py
from typing import Optional

from pydantic import Field

from models.service import Service
from schemas.validators import RequestModel, RuPrintableASCII


class ServiceIn(RequestModel):
    """Схема создания и обновления услуги"""
    name: RuPrintableASCII = Field(min_length=1, max_length=255)
    price: float = 0
    category_id: Optional[int] = None

    def to_model(self) -> Service:
        return Service(name=self.name, price=self.price, category_id=self.category_id)
