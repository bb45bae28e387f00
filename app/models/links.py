# app/models/links.py
from typing import Optional
from sqlmodel import Field, SQLModel


class UserDepartmentLink(SQLModel, table=True):
    """Связь сотрудник - отделение"""
    __tablename__ = "users_departments"

    user_id: Optional[int] = Field(default=None, foreign_key="users.id", primary_key=True)
    department_id: Optional[int] = Field(default=None, foreign_key="departments.id", primary_key=True)


class UserServiceLink(SQLModel, table=True):
    """Связь сотрудник - услуга"""
    __tablename__ = "users_services"

    user_id: Optional[int] = Field(default=None, foreign_key="users.id", primary_key=True)
    service_id: Optional[int] = Field(default=None, foreign_key="services.id", primary_key=True)


class DepartmentServiceLink(SQLModel, table=True):
    """Связь отделение - услуга"""
    __tablename__ = "departments_services"

    department_id: Optional[int] = Field(default=None, foreign_key="departments.id", primary_key=True)
    service_id: Optional[int] = Field(default=None, foreign_key="services.id", primary_key=True)
