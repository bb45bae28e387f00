# app/routes/clients.py
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from auth.authenticate import authenticate, require_admin, require_superuser
from database.database import get_session
from models.read import ClientRead
from models.user import User
from schemas.client import ClientIn
from services import ClientService

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("", response_model=List[ClientRead])
async def get_clients(
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return ClientService(session).get_all()


@router.get("/{client_id}", response_model=ClientRead)
async def get_client(
        client_id: str,
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return ClientService(session).get(client_id)


@router.post("", response_model=ClientRead)
async def create_client(
        data: ClientIn,
        user: User = Depends(require_admin),
        session: Session = Depends(get_session)
):
    return ClientService(session).create(data.to_model())


@router.put("/{client_id}", response_model=ClientRead)
async def update_client(
        client_id: str,
        data: ClientIn,
        user: User = Depends(require_admin),
        session: Session = Depends(get_session)
):
    return ClientService(session).update(client_id, data.to_model())


@router.delete("/{client_id}", response_model=ClientRead)
async def delete_client(
        client_id: str,
        user: User = Depends(require_superuser),
        session: Session = Depends(get_session)
):
    return ClientService(session).delete(client_id)
