# app/schemas/pet.py
from typing import Optional

from pydantic import Field

from models.pet import Pet
from schemas.validators import OptionalRuAlpha, RequestModel, RuPrintableASCII


class PetIn(RequestModel):
    """Схема создания и обновления питомца"""
    name: OptionalRuAlpha = Field(default="", max_length=255)
    type: RuPrintableASCII = ""
    breed: RuPrintableASCII = ""
    colour: RuPrintableASCII = ""
    sex: OptionalRuAlpha = ""
    client_id: Optional[int] = None

    def to_model(self) -> Pet:
        return Pet(**self.model_dump())
