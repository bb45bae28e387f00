# app/repositories/pet.py
from models.pet import Pet
from repositories.base import BaseRepository
from repositories.client import ClientRepository

PET_FIELDS = ("name", "type", "breed", "colour", "sex", "client_id")


class PetRepository(BaseRepository[Pet]):
    model = Pet
    relations = (("client",),)
    create_fields = PET_FIELDS
    update_fields = PET_FIELDS

    def _check_references(self, entity: Pet) -> None:
        ClientRepository(self.session).ensure_exists(entity.client_id)
