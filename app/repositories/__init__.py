# app/repositories/__init__.py
from .base import BaseRepository, filter_existing, transaction
from .category import CategoryRepository
from .client import ClientRepository
from .department import DepartmentRepository
from .lead import LeadRepository
from .pet import PetRepository
from .role import RoleRepository
from .service import ServiceRepository
from .user import UserRepository
from .visit import VisitRepository

__all__ = [
    "BaseRepository",
    "filter_existing",
    "transaction",
    "CategoryRepository",
    "ClientRepository",
    "DepartmentRepository",
    "LeadRepository",
    "PetRepository",
    "RoleRepository",
    "ServiceRepository",
    "UserRepository",
    "VisitRepository",
]
