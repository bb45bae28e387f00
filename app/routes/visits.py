# app/routes/visits.py
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from auth.authenticate import authenticate, require_admin, require_superuser
from database.database import get_session
from models.read import VisitRead
from models.user import User
from schemas.visit import VisitIn
from services import VisitService

router = APIRouter(prefix="/visits", tags=["visits"])


@router.get("", response_model=List[VisitRead])
async def get_visits(
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return VisitService(session).get_all()


@router.get("/{visit_id}", response_model=VisitRead)
async def get_visit(
        visit_id: str,
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return VisitService(session).get(visit_id)


@router.post("", response_model=VisitRead)
async def create_visit(
        data: VisitIn,
        user: User = Depends(require_admin),
        session: Session = Depends(get_session)
):
    """Записать клиента на прием; автором изменений становится текущий сотрудник"""
    return VisitService(session).create(data.to_model(last_updated_by_id=user.id))


@router.put("/{visit_id}", response_model=VisitRead)
async def update_visit(
        visit_id: str,
        data: VisitIn,
        user: User = Depends(require_admin),
        session: Session = Depends(get_session)
):
    return VisitService(session).update(visit_id, data.to_model(last_updated_by_id=user.id))


@router.delete("/{visit_id}", response_model=VisitRead)
async def delete_visit(
        visit_id: str,
        user: User = Depends(require_superuser),
        session: Session = Depends(get_session)
):
    return VisitService(session).delete(visit_id)
