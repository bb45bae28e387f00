# app/routes/leads.py
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from auth.authenticate import authenticate, require_superuser
from database.database import get_session
from models.lead import LEAD_STATUSES, LEAD_TYPES
from models.read import LeadRead
from models.user import User
from schemas.lead import LeadIn
from services import LeadService

router = APIRouter(prefix="/leads", tags=["leads"])


@router.get("", response_model=List[LeadRead])
async def get_leads(
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return LeadService(session).get_all()


# Справочники объявлены раньше /{lead_id}
@router.get("/types", response_model=List[str])
async def get_lead_types(user: User = Depends(authenticate)):
    """Способы обращения клиента"""
    return LEAD_TYPES


@router.get("/statuses", response_model=List[str])
async def get_lead_statuses(user: User = Depends(authenticate)):
    """Статусы обработки заявки"""
    return LEAD_STATUSES


@router.get("/{lead_id}", response_model=LeadRead)
async def get_lead(
        lead_id: str,
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return LeadService(session).get(lead_id)


@router.post("", response_model=LeadRead)
async def create_lead(data: LeadIn, session: Session = Depends(get_session)):
    """
    Создать заявку с сайта.

    Вход в систему не требуется, заявка всегда создается в статусе open.
    """
    return LeadService(session).create(data.to_model())


@router.put("/{lead_id}", response_model=LeadRead)
async def update_lead(
        lead_id: str,
        data: LeadIn,
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return LeadService(session).update(lead_id, data.to_model(last_updated_by_id=user.id))


@router.delete("/{lead_id}", response_model=LeadRead)
async def delete_lead(
        lead_id: str,
        user: User = Depends(require_superuser),
        session: Session = Depends(get_session)
):
    return LeadService(session).delete(lead_id)
