# app/schemas/client.py
from datetime import date
from typing import Optional

from pydantic import EmailStr, Field

from models.client import Client
from schemas.validators import OptionalRuAlpha, Phone, RequestModel, RuPrintableASCII


class ClientIn(RequestModel):
    """Схема создания и обновления клиента"""
    surname: OptionalRuAlpha = Field(default="", max_length=255)
    name: OptionalRuAlpha = Field(default="", max_length=255)
    patronymic: OptionalRuAlpha = Field(default="", max_length=255)
    sex: OptionalRuAlpha = ""
    birth_date: Optional[date] = None
    phone: Phone
    email: EmailStr
    info: RuPrintableASCII = ""

    def to_model(self) -> Client:
        return Client(**self.model_dump())
