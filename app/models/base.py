# app/models/base.py
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy import event
from sqlalchemy.orm import ORMExecuteState, Session, with_loader_criteria
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseTable(SQLModel):
    """Общие поля всех сущностей: идентификатор, временные метки и отметка удаления"""
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column_kwargs={"onupdate": utcnow}
    )
    deleted_at: Optional[datetime] = Field(default=None, index=True)


def _soft_delete_criteria() -> list:
    """Условие deleted_at IS NULL для каждой таблицы, унаследованной от BaseTable"""
    return [
        with_loader_criteria(
            mapper.class_,
            lambda cls: cls.deleted_at.is_(None),
            include_aliases=True,
        )
        for mapper in SQLModel._sa_registry.mappers
        if issubclass(mapper.class_, BaseTable)
    ]


@event.listens_for(Session, "do_orm_execute")
def _hide_deleted(execute_state: ORMExecuteState) -> None:
    """Исключает мягко удаленные строки из всех выборок, включая связанные"""
    if (
        execute_state.is_select
        and not execute_state.is_column_load
        and not execute_state.is_relationship_load
        and not execute_state.execution_options.get("include_deleted", False)
    ):
        execute_state.statement = execute_state.statement.options(*_soft_delete_criteria())


class ReadModel(BaseModel):
    """Базовая схема ответа: camelCase в JSON, чтение из ORM-объектов"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class EntityRead(ReadModel):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
