# app/utils/__init__.py
from .slug import is_numeric, is_slug, make_slug

__all__ = ["is_numeric", "is_slug", "make_slug"]
