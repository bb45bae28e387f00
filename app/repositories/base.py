# app/repositories/base.py
import logging
from contextlib import contextmanager
from typing import Callable, Generic, Iterable, Iterator, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from sqlmodel import Session, SQLModel, select

from exceptions import IntegrityViolationError, NotFoundError
from models.base import BaseTable, utcnow

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseTable)


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """
    Выполняет блок в одной транзакции: фиксирует при успехе,
    откатывает при любой ошибке.
    """
    try:
        yield session
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.debug(f"Нарушение ограничения БД: {e.orig}")
        raise IntegrityViolationError() from e
    except Exception:
        session.rollback()
        raise


def filter_existing(ids: Iterable[int], exists: Callable[[int], bool]) -> List[int]:
    """Оставляет только существующие идентификаторы, сохраняя порядок и убирая повторы"""
    result = []
    for entity_id in ids or []:
        if entity_id not in result and exists(entity_id):
            result.append(entity_id)
    return result


def copy_fields(source: SQLModel, target: SQLModel, fields: Sequence[str]) -> None:
    """Переносит в target только перечисленные поля"""
    for field in fields:
        setattr(target, field, getattr(source, field))


class BaseRepository(Generic[ModelType]):
    """
    Общая часть CRUD-репозиториев.

    Наследник задает модель, связи для жадной загрузки и список полей,
    которые разрешено записывать при создании и обновлении.
    """
    model: Type[ModelType]
    # Пути связей для selectinload, например (("pet", "client"),)
    relations: Sequence[Sequence[str]] = ()
    create_fields: Sequence[str] = ()
    update_fields: Sequence[str] = ()
    # Таблицы связей многие-ко-многим и колонка с id этой сущности
    link_tables: Sequence[tuple] = ()

    def __init__(self, session: Session):
        self.session = session

    def _load_options(self):
        options = []
        for path in self.relations:
            attr = getattr(self.model, path[0])
            option = selectinload(attr)
            owner = attr.property.mapper.class_
            for name in path[1:]:
                attr = getattr(owner, name)
                option = option.selectinload(attr)
                owner = attr.property.mapper.class_
            options.append(option)
        return options

    def _query(self):
        return (
            select(self.model)
            .options(*self._load_options())
            .execution_options(populate_existing=True)
        )

    def exists(self, entity_id: Optional[int]) -> bool:
        if entity_id is None:
            return False
        return self.session.exec(
            select(self.model).where(self.model.id == entity_id)
        ).first() is not None

    def ensure_exists(self, entity_id: Optional[int]) -> None:
        if not self.exists(entity_id):
            raise NotFoundError()

    def find(self, entity_id: int) -> Optional[ModelType]:
        return self.session.exec(self._query().where(self.model.id == entity_id)).first()

    def get(self, entity_id: int) -> ModelType:
        entity = self.find(entity_id)
        if entity is None:
            raise NotFoundError()
        return entity

    def find_many(self, ids: List[int]) -> List[ModelType]:
        """Загрузка записей по списку id в порядке списка, отсутствующие пропускаются"""
        if not ids:
            return []
        rows = self.session.exec(select(self.model).where(self.model.id.in_(ids))).all()
        by_id = {row.id: row for row in rows}
        return [by_id[entity_id] for entity_id in ids if entity_id in by_id]

    def get_all(self) -> List[ModelType]:
        return list(self.session.exec(self._query().order_by(self.model.id)).all())

    def create(self, entity: ModelType) -> ModelType:
        with transaction(self.session):
            new_id = self._create(entity)
        return self.get(new_id)

    def _create(self, entity: ModelType) -> int:
        """Проверки и вставка внутри транзакции, возвращает id новой записи"""
        self._check_references(entity)
        return self._insert(entity).id

    def _insert(self, entity: ModelType) -> ModelType:
        row = self.model()
        copy_fields(entity, row, self.create_fields)
        self.session.add(row)
        self.session.flush()
        return row

    def update(self, entity: ModelType, entity_id: int) -> ModelType:
        with transaction(self.session):
            self._update(entity, entity_id)
        return self.get(entity_id)

    def _update(self, entity: ModelType, entity_id: int) -> ModelType:
        row = self.get(entity_id)
        self._check_references(entity)
        copy_fields(entity, row, self.update_fields)
        self.session.add(row)
        self.session.flush()
        return row

    def _check_references(self, entity: ModelType) -> None:
        """Проверка существования записей по внешним ключам"""

    def delete(self, entity_id: int) -> ModelType:
        with transaction(self.session):
            entity = self.get(entity_id)
            entity.deleted_at = utcnow()
            self.session.add(entity)
            for table, column in self.link_tables:
                self.session.exec(delete(table).where(getattr(table, column) == entity_id))
            self.session.flush()
            # Снимок удаленной записи не должен обновляться после фиксации
            self.session.expunge(entity)
        return entity
