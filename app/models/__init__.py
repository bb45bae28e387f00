# app/models/__init__.py
# Импорт всех моделей, чтобы SQLModel.metadata знала все таблицы
from .links import DepartmentServiceLink, UserDepartmentLink, UserServiceLink
from .role import Role
from .category import Category
from .service import Service
from .department import Department
from .client import Client
from .pet import Pet
from .user import User
from .visit import Visit
from .lead import Lead

__all__ = [
    "DepartmentServiceLink",
    "UserDepartmentLink",
    "UserServiceLink",
    "Role",
    "Category",
    "Service",
    "Department",
    "Client",
    "Pet",
    "User",
    "Visit",
    "Lead",
]
