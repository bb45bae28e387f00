# app/repositories/role.py
from models.role import Role
from repositories.base import BaseRepository


class RoleRepository(BaseRepository[Role]):
    model = Role
    create_fields = ("name",)
    update_fields = ("name",)
