# app/routes/categories.py
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from auth.authenticate import authenticate, require_owner
from database.database import get_session
from models.read import CategoryRead
from models.user import User
from schemas.category import CategoryIn
from services import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[CategoryRead])
async def get_categories(
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return CategoryService(session).get_all()


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(
        category_id: str,
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return CategoryService(session).get(category_id)


@router.post("", response_model=CategoryRead)
async def create_category(
        data: CategoryIn,
        user: User = Depends(require_owner),
        session: Session = Depends(get_session)
):
    return CategoryService(session).create(data.to_model())


@router.put("/{category_id}", response_model=CategoryRead)
async def update_category(
        category_id: str,
        data: CategoryIn,
        user: User = Depends(require_owner),
        session: Session = Depends(get_session)
):
    return CategoryService(session).update(category_id, data.to_model())


@router.delete("/{category_id}", response_model=CategoryRead)
async def delete_category(
        category_id: str,
        user: User = Depends(require_owner),
        session: Session = Depends(get_session)
):
    return CategoryService(session).delete(category_id)
