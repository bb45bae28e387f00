# app/repositories/department.py
from typing import List, Optional

from exceptions import NotFoundError
from models.department import Department
from models.links import DepartmentServiceLink, UserDepartmentLink
from repositories.base import BaseRepository, filter_existing, transaction
from repositories.service import ServiceRepository
from utils.slug import make_slug


class DepartmentRepository(BaseRepository[Department]):
    model = Department
    relations = (("users",), ("services",))
    link_tables = ((UserDepartmentLink, "department_id"), (DepartmentServiceLink, "department_id"))

    def get_by_slug(self, slug: str) -> Department:
        department = self.session.exec(self._query().where(Department.slug == slug)).first()
        if department is None:
            raise NotFoundError()
        return department

    def create(self, entity: Department, service_ids: Optional[List[int]] = None) -> Department:
        with transaction(self.session):
            row = Department(name=entity.name, slug=make_slug(entity.name))
            row.services = self._existing_services(service_ids or [])
            self.session.add(row)
            self.session.flush()
            department_id = row.id
        return self.get(department_id)

    def update(self, entity: Department, entity_id: int,
               service_ids: Optional[List[int]] = None) -> Department:
        with transaction(self.session):
            row = self.get(entity_id)
            row.services = self._existing_services(service_ids or [])
            row.name = entity.name
            row.slug = make_slug(entity.name)
            self.session.add(row)
            self.session.flush()
        return self.get(entity_id)

    def _existing_services(self, service_ids: List[int]):
        services = ServiceRepository(self.session)
        return services.find_many(filter_existing(service_ids, services.exists))
