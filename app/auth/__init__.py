# app/auth/__init__.py
from .access import AccessLevel
from .hash_password import HashPassword
from .session import Principal, get_session_store

__all__ = [
    "AccessLevel",
    "HashPassword",
    "Principal",
    "get_session_store",
]
