# app/routes/departments.py
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from auth.authenticate import authenticate, require_owner
from database.database import get_session
from models.read import DepartmentRead
from models.user import User
from schemas.department import DepartmentIn
from services import DepartmentService

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("", response_model=List[DepartmentRead])
async def get_departments(
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return DepartmentService(session).get_all()


@router.get("/{department_id}", response_model=DepartmentRead)
async def get_department(
        department_id: str,
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    """Получить отделение по id или slug"""
    return DepartmentService(session).get(department_id)


@router.post("", response_model=DepartmentRead)
async def create_department(
        data: DepartmentIn,
        user: User = Depends(require_owner),
        session: Session = Depends(get_session)
):
    """
    Создать отделение.

    Несуществующие услуги из списка services пропускаются.
    """
    return DepartmentService(session).create(data.to_model(), data.services)


@router.put("/{department_id}", response_model=DepartmentRead)
async def update_department(
        department_id: str,
        data: DepartmentIn,
        user: User = Depends(require_owner),
        session: Session = Depends(get_session)
):
    return DepartmentService(session).update(department_id, data.to_model(), data.services)


@router.delete("/{department_id}", response_model=DepartmentRead)
async def delete_department(
        department_id: str,
        user: User = Depends(require_owner),
        session: Session = Depends(get_session)
):
    return DepartmentService(session).delete(department_id)
