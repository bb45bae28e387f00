# app/repositories/visit.py
from models.visit import Visit
from repositories.base import BaseRepository
from repositories.client import ClientRepository
from repositories.pet import PetRepository
from repositories.service import ServiceRepository
from repositories.user import UserRepository

VISIT_FIELDS = (
    "date_time", "info", "client_id", "pet_id", "doctor_id", "last_updated_by_id", "service_id",
)


class VisitRepository(BaseRepository[Visit]):
    model = Visit
    relations = (
        ("client",),
        ("pet", "client"),
        ("doctor",),
        ("last_updated_by",),
        ("service",),
    )
    create_fields = VISIT_FIELDS
    update_fields = VISIT_FIELDS

    def _check_references(self, entity: Visit) -> None:
        ClientRepository(self.session).ensure_exists(entity.client_id)
        PetRepository(self.session).ensure_exists(entity.pet_id)
        users = UserRepository(self.session)
        users.ensure_exists(entity.doctor_id)
        users.ensure_exists(entity.last_updated_by_id)
        ServiceRepository(self.session).ensure_exists(entity.service_id)
