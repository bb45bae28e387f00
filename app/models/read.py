# app/models/read.py
"""
Схемы ответов API.

Краткие схемы (*Brief) содержат только собственные поля сущности и
используются для вложенных объектов, полные (*Read) - для корня ответа.
Хеш пароля сотрудника не входит ни в одну схему.
"""
from datetime import date, datetime
from typing import List, Optional

from models.base import EntityRead


class RoleRead(EntityRead):
    name: str


class CategoryRead(EntityRead):
    name: str


class ServiceBrief(EntityRead):
    name: str
    price: float
    category_id: Optional[int] = None


class DepartmentBrief(EntityRead):
    name: str
    slug: str


class UserBrief(EntityRead):
    username: str
    active: bool
    surname: str
    name: str
    patronymic: str
    profession: str
    slug: str
    role_id: Optional[int] = None


class ClientRead(EntityRead):
    surname: str
    name: str
    patronymic: str
    sex: str
    birth_date: Optional[date] = None
    phone: str
    email: str
    info: str


class PetRead(EntityRead):
    name: str
    type: str
    breed: str
    colour: str
    sex: str
    client_id: Optional[int] = None
    client: Optional[ClientRead] = None


class ServiceRead(ServiceBrief):
    category: Optional[CategoryRead] = None
    users: List[UserBrief] = []
    departments: List[DepartmentBrief] = []


class DepartmentRead(DepartmentBrief):
    users: List[UserBrief] = []
    services: List[ServiceBrief] = []


class UserRead(UserBrief):
    email: Optional[str] = None
    phone: Optional[str] = None
    sex: str
    birth_date: Optional[date] = None
    info: str
    role: Optional[RoleRead] = None
    departments: List[DepartmentBrief] = []
    services: List[ServiceBrief] = []


class VisitRead(EntityRead):
    date_time: Optional[datetime] = None
    info: str
    client_id: Optional[int] = None
    client: Optional[ClientRead] = None
    pet_id: Optional[int] = None
    pet: Optional[PetRead] = None
    doctor_id: Optional[int] = None
    doctor: Optional[UserBrief] = None
    service_id: Optional[int] = None
    service: Optional[ServiceBrief] = None
    last_updated_by_id: Optional[int] = None
    last_updated_by: Optional[UserBrief] = None


class LeadRead(EntityRead):
    name: str
    phone: str
    email: str
    comment: str
    type: str
    status: str
    doctor_id: Optional[int] = None
    doctor: Optional[UserBrief] = None
    last_updated_by_id: Optional[int] = None
    last_updated_by: Optional[UserBrief] = None
