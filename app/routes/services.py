# app/routes/services.py
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from auth.authenticate import authenticate, require_owner
from database.database import get_session
from models.read import ServiceRead
from models.user import User
from schemas.service import ServiceIn
from services import ServiceService

router = APIRouter(prefix="/services", tags=["services"])


@router.get("", response_model=List[ServiceRead])
async def get_services(
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return ServiceService(session).get_all()


@router.get("/{service_id}", response_model=ServiceRead)
async def get_service(
        service_id: str,
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return ServiceService(session).get(service_id)


@router.post("", response_model=ServiceRead)
async def create_service(
        data: ServiceIn,
        user: User = Depends(require_owner),
        session: Session = Depends(get_session)
):
    return ServiceService(session).create(data.to_model())


@router.put("/{service_id}", response_model=ServiceRead)
async def update_service(
        service_id: str,
        data: ServiceIn,
        user: User = Depends(require_owner),
        session: Session = Depends(get_session)
):
    return ServiceService(session).update(service_id, data.to_model())


@router.delete("/{service_id}", response_model=ServiceRead)
async def delete_service(
        service_id: str,
        user: User = Depends(require_owner),
        session: Session = Depends(get_session)
):
    return ServiceService(session).delete(service_id)
