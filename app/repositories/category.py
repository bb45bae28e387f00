# app/repositories/category.py
from models.category import Category
from repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    model = Category
    create_fields = ("name",)
    update_fields = ("name",)
