# app/schemas/department.py
from typing import List

from pydantic import Field

from models.department import Department
from schemas.validators import RequestModel, RuAlpha


class DepartmentIn(RequestModel):
    """Схема создания и обновления отделения"""
    name: RuAlpha = Field(max_length=255)
    services: List[int] = []

    def to_model(self) -> Department:
        return Department(name=self.name)
