# app/services/user.py
import logging
from typing import List, Optional

from exceptions import InputError, VetClinicError
from models.user import User
from repositories import UserRepository
from services.base import EntityService, parse_id
from utils.slug import is_numeric, is_slug

logger = logging.getLogger(__name__)


class UserService(EntityService):
    repository_class = UserRepository

    def get(self, param: str) -> User:
        """Поиск сотрудника по id или по slug"""
        try:
            if is_numeric(param):
                return self.repository.get(int(param))
            if is_slug(param):
                return self.repository.get_by_slug(param)
            raise InputError()
        except VetClinicError as e:
            self._fail(f"get {param}", e)
            raise

    def find(self, user_id: int) -> Optional[User]:
        return self.repository.find(user_id)

    def update(self, param: str, entity: User, owner: bool = True,
               department_ids: Optional[List[int]] = None,
               service_ids: Optional[List[int]] = None) -> User:
        try:
            return self.repository.update(
                entity, parse_id(param), owner, department_ids, service_ids
            )
        except VetClinicError as e:
            self._fail(f"update {param}", e)
            raise

    def login(self, login: str, password: str) -> User:
        try:
            user = self.repository.login(login, password)
        except VetClinicError as e:
            # Пароль и логин в лог не пишем
            logger.warning(f"Неудачная попытка входа: {e.message}")
            raise
        logger.info(f"Сотрудник {user.username} вошел в систему")
        return user

    def update_password(self, user_id: int, old_password: str, new_password: str) -> User:
        try:
            user = self.repository.update_password(user_id, old_password, new_password)
        except VetClinicError as e:
            self._fail(f"update password {user_id}", e)
            raise
        logger.info(f"Сотрудник {user_id} сменил пароль")
        return user
