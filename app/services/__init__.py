# app/services/__init__.py
from .department import DepartmentService
from .entities import (
    CategoryService,
    ClientService,
    LeadService,
    PetService,
    RoleService,
    ServiceService,
    VisitService,
)
from .user import UserService

__all__ = [
    "CategoryService",
    "ClientService",
    "DepartmentService",
    "LeadService",
    "PetService",
    "RoleService",
    "ServiceService",
    "UserService",
    "VisitService",
]
