# app/routes/__init__.py
from .categories import router as categories
from .clients import router as clients
from .departments import router as departments
from .leads import router as leads
from .pets import router as pets
from .roles import router as roles
from .services import router as services
from .system import router as system
from .users import router as users
from .visits import router as visits

__all__ = [
    "categories",
    "clients",
    "departments",
    "leads",
    "pets",
    "roles",
    "services",
    "system",
    "users",
    "visits",
]
