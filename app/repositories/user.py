# app/repositories/user.py
from typing import List, Optional

from sqlmodel import or_

from auth.hash_password import HashPassword
from exceptions import NotFoundError, PasswordMismatchError
from models.links import UserDepartmentLink, UserServiceLink
from models.user import User
from repositories.base import BaseRepository, copy_fields, filter_existing, transaction
from repositories.department import DepartmentRepository
from repositories.role import RoleRepository
from repositories.service import ServiceRepository
from utils.slug import make_slug

hash_password = HashPassword()

# Поля, которые сотрудник может менять в своем профиле
SELF_UPDATE_FIELDS = (
    "email", "phone", "surname", "name", "patronymic", "sex", "birth_date", "slug",
)
# Поля, которые меняет владелец клиники
OWNER_UPDATE_FIELDS = (
    "email", "phone", "active", "surname", "name", "patronymic", "sex",
    "birth_date", "profession", "info", "slug", "role_id",
)


def make_user_slug(user: User, user_id: int) -> str:
    """Slug из ФИО сотрудника, либо его id, если ФИО не заполнено"""
    if user.surname or user.name or user.patronymic:
        return make_slug(f"{user.surname} {user.name} {user.patronymic}")
    return str(user_id)


class UserRepository(BaseRepository[User]):
    model = User
    relations = (("role",), ("departments",), ("services",))
    create_fields = ("username", "active", "password", "role_id")
    link_tables = ((UserDepartmentLink, "user_id"), (UserServiceLink, "user_id"))

    def get_by_slug(self, slug: str) -> User:
        user = self.session.exec(self._query().where(User.slug == slug).order_by(User.id)).first()
        if user is None:
            raise NotFoundError()
        return user

    def login(self, login: str, password: str) -> User:
        """Поиск сотрудника по логину, e-mail или телефону и проверка пароля"""
        user = self.session.exec(
            self._query()
            .where(or_(User.username == login, User.email == login, User.phone == login))
            .order_by(User.id)
        ).first()
        if user is None:
            raise NotFoundError()
        if not hash_password.verify_hash(password, user.password):
            raise PasswordMismatchError()
        return user

    def _check_references(self, entity: User) -> None:
        RoleRepository(self.session).ensure_exists(entity.role_id)

    def _create(self, entity: User) -> int:
        self._check_references(entity)
        entity.active = True
        entity.password = hash_password.create_hash(entity.password)
        row = self._insert(entity)
        row.slug = str(row.id)
        self.session.add(row)
        self.session.flush()
        return row.id

    def update(self, entity: User, entity_id: int, owner: bool = True,
               department_ids: Optional[List[int]] = None,
               service_ids: Optional[List[int]] = None) -> User:
        """
        Обновление сотрудника.

        Если owner=True, меняются также роль, активность, профессия, отделения
        и услуги; несуществующие отделения и услуги молча отбрасываются.
        """
        with transaction(self.session):
            if owner:
                self._update_owner(entity, entity_id, department_ids or [], service_ids or [])
            else:
                self._update_self(entity, entity_id)
        return self.get(entity_id)

    def _update_self(self, entity: User, entity_id: int) -> None:
        row = self.get(entity_id)
        entity.slug = make_user_slug(entity, entity_id)
        self._write(row, entity, SELF_UPDATE_FIELDS)

    def _update_owner(self, entity: User, entity_id: int,
                      department_ids: List[int], service_ids: List[int]) -> None:
        row = self.get(entity_id)
        self._check_references(entity)

        departments = DepartmentRepository(self.session)
        row.departments = departments.find_many(filter_existing(department_ids, departments.exists))
        services = ServiceRepository(self.session)
        row.services = services.find_many(filter_existing(service_ids, services.exists))

        entity.slug = make_user_slug(entity, entity_id)
        self._write(row, entity, OWNER_UPDATE_FIELDS)

    def _write(self, row: User, entity: User, fields) -> None:
        copy_fields(entity, row, fields)
        self.session.add(row)
        self.session.flush()

    def update_password(self, entity_id: int, old_password: str, new_password: str) -> User:
        with transaction(self.session):
            row = self.get(entity_id)
            if not hash_password.verify_hash(old_password, row.password):
                raise PasswordMismatchError()
            row.password = hash_password.create_hash(new_password)
            self.session.add(row)
        return self.get(entity_id)
