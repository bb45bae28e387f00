# app/schemas/lead.py
from typing import Optional

from pydantic import Field

from models.lead import Lead
from schemas.validators import (
    OptionalEmail,
    OptionalPhone,
    OptionalRuAlpha,
    RequestModel,
    RuPrintableASCII,
)


class LeadIn(RequestModel):
    """Схема создания и обновления заявки; автор изменений берется из сессии"""
    name: OptionalRuAlpha = Field(default="", max_length=255)
    phone: OptionalPhone = ""
    email: OptionalEmail = None
    comment: RuPrintableASCII = ""
    type: RuPrintableASCII = ""
    status: RuPrintableASCII = ""
    doctor_id: Optional[int] = None

    def to_model(self, last_updated_by_id: Optional[int] = None) -> Lead:
        return Lead(
            name=self.name,
            phone=self.phone,
            email=self.email or "",
            comment=self.comment,
            type=self.type,
            status=self.status,
            doctor_id=self.doctor_id,
            last_updated_by_id=last_updated_by_id,
        )
