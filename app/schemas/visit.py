# app/schemas/visit.py
from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator

from models.visit import Visit
from schemas.validators import RequestModel, RuPrintableASCII


def _assume_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Время без часового пояса считается временем UTC"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class VisitIn(RequestModel):
    """Схема создания и обновления приема; автор изменений берется из сессии"""
    date_time: Annotated[Optional[datetime], AfterValidator(_assume_utc)] = None
    info: RuPrintableASCII = ""
    client_id: Optional[int] = None
    pet_id: Optional[int] = None
    doctor_id: Optional[int] = None
    service_id: Optional[int] = None

    def to_model(self, last_updated_by_id: Optional[int] = None) -> Visit:
        return Visit(**self.model_dump(), last_updated_by_id=last_updated_by_id)
