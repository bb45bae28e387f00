# app/services/department.py
from typing import List, Optional

from exceptions import InputError, VetClinicError
from models.department import Department
from repositories import DepartmentRepository
from services.base import EntityService, parse_id
from utils.slug import is_numeric, is_slug


class DepartmentService(EntityService):
    repository_class = DepartmentRepository

    def get(self, param: str) -> Department:
        """Поиск отделения по id или по slug"""
        try:
            if is_numeric(param):
                return self.repository.get(int(param))
            if is_slug(param):
                return self.repository.get_by_slug(param)
            raise InputError()
        except VetClinicError as e:
            self._fail(f"get {param}", e)
            raise

    def create(self, entity: Department, service_ids: Optional[List[int]] = None) -> Department:
        try:
            return self.repository.create(entity, service_ids)
        except VetClinicError as e:
            self._fail("create", e)
            raise

    def update(self, param: str, entity: Department,
               service_ids: Optional[List[int]] = None) -> Department:
        try:
            return self.repository.update(entity, parse_id(param), service_ids)
        except VetClinicError as e:
            self._fail(f"update {param}", e)
            raise
