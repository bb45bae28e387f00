# app/schemas/role.py
from models.role import Role
from schemas.validators import RequestModel, RuAlpha


class RoleIn(RequestModel):
    """Схема создания и обновления роли"""
    name: RuAlpha

    def to_model(self) -> Role:
        return Role(name=self.name)
