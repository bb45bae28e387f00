# app/repositories/service.py
from models.links import DepartmentServiceLink, UserServiceLink
from models.service import Service
from repositories.base import BaseRepository
from repositories.category import CategoryRepository


class ServiceRepository(BaseRepository[Service]):
    model = Service
    relations = (("category",), ("users",), ("departments",))
    create_fields = ("name", "price", "category_id")
    update_fields = ("name", "price", "category_id")
    link_tables = ((UserServiceLink, "service_id"), (DepartmentServiceLink, "service_id"))

    def _check_references(self, entity: Service) -> None:
        CategoryRepository(self.session).ensure_exists(entity.category_id)
