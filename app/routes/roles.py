# app/routes/roles.py
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from auth.authenticate import require_owner, require_superuser
from database.database import get_session
from models.read import RoleRead
from models.user import User
from schemas.role import RoleIn
from services import RoleService

router = APIRouter(prefix="/roles", tags=["roles"])


@router.get("", response_model=List[RoleRead])
async def get_roles(
        user: User = Depends(require_owner),
        session: Session = Depends(get_session)
):
    return RoleService(session).get_all()


@router.get("/{role_id}", response_model=RoleRead)
async def get_role(
        role_id: str,
        user: User = Depends(require_owner),
        session: Session = Depends(get_session)
):
    return RoleService(session).get(role_id)


@router.post("", response_model=RoleRead)
async def create_role(
        data: RoleIn,
        user: User = Depends(require_superuser),
        session: Session = Depends(get_session)
):
    return RoleService(session).create(data.to_model())


@router.put("/{role_id}", response_model=RoleRead)
async def update_role(
        role_id: str,
        data: RoleIn,
        user: User = Depends(require_superuser),
        session: Session = Depends(get_session)
):
    return RoleService(session).update(role_id, data.to_model())


@router.delete("/{role_id}", response_model=RoleRead)
async def delete_role(
        role_id: str,
        user: User = Depends(require_superuser),
        session: Session = Depends(get_session)
):
    return RoleService(session).delete(role_id)
