# app/services/base.py
import logging
from typing import Generic, List, Type, TypeVar

from sqlmodel import Session

from exceptions import InputError, VetClinicError
from models.base import BaseTable
from repositories.base import BaseRepository
from utils.slug import is_numeric

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseTable)


def parse_id(param: str) -> int:
    """Преобразует идентификатор из пути запроса в число"""
    if not is_numeric(param):
        raise InputError()
    return int(param)


class EntityService(Generic[ModelType]):
    """
    Сервис сущности: разбирает параметры запроса, вызывает репозиторий
    и пишет в лог все неудачные операции.
    """
    repository_class: Type[BaseRepository]

    def __init__(self, session: Session):
        self.repository = self.repository_class(session)
        self.name = self.repository.model.__name__

    def _fail(self, action: str, error: VetClinicError) -> None:
        logger.error(f"{self.name}: {action} failed: {error.message}")

    def get(self, param: str) -> ModelType:
        try:
            return self.repository.get(parse_id(param))
        except VetClinicError as e:
            self._fail(f"get {param}", e)
            raise

    def get_all(self) -> List[ModelType]:
        return self.repository.get_all()

    def create(self, entity: ModelType) -> ModelType:
        try:
            return self.repository.create(entity)
        except VetClinicError as e:
            self._fail("create", e)
            raise

    def update(self, param: str, entity: ModelType) -> ModelType:
        try:
            return self.repository.update(entity, parse_id(param))
        except VetClinicError as e:
            self._fail(f"update {param}", e)
            raise

    def delete(self, param: str) -> ModelType:
        try:
            entity = self.repository.delete(parse_id(param))
        except VetClinicError as e:
            self._fail(f"delete {param}", e)
            raise
        logger.info(f"{self.name} {entity.id} удален")
        return entity
