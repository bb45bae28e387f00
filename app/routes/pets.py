# app/routes/pets.py
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from auth.authenticate import authenticate, require_superuser
from database.database import get_session
from models.read import PetRead
from models.user import User
from schemas.pet import PetIn
from services import PetService

router = APIRouter(prefix="/pets", tags=["pets"])


@router.get("", response_model=List[PetRead])
async def get_pets(
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return PetService(session).get_all()


@router.get("/{pet_id}", response_model=PetRead)
async def get_pet(
        pet_id: str,
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return PetService(session).get(pet_id)


@router.post("", response_model=PetRead)
async def create_pet(
        data: PetIn,
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return PetService(session).create(data.to_model())


@router.put("/{pet_id}", response_model=PetRead)
async def update_pet(
        pet_id: str,
        data: PetIn,
        user: User = Depends(authenticate),
        session: Session = Depends(get_session)
):
    return PetService(session).update(pet_id, data.to_model())


@router.delete("/{pet_id}", response_model=PetRead)
async def delete_pet(
        pet_id: str,
        user: User = Depends(require_superuser),
        session: Session = Depends(get_session)
):
    return PetService(session).delete(pet_id)
