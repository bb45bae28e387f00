# app/repositories/lead.py
from models.lead import LEAD_STATUS_OPEN, Lead
from repositories.base import BaseRepository
from repositories.user import UserRepository


class LeadRepository(BaseRepository[Lead]):
    model = Lead
    relations = (("doctor",), ("last_updated_by",))
    create_fields = ("name", "phone", "email", "comment", "type", "status", "doctor_id")
    update_fields = (
        "name", "phone", "email", "comment", "type", "status", "doctor_id", "last_updated_by_id",
    )

    def _create(self, entity: Lead) -> int:
        # Заявка создается без сессии, проверяется только врач
        UserRepository(self.session).ensure_exists(entity.doctor_id)
        entity.status = LEAD_STATUS_OPEN
        return self._insert(entity).id

    def _check_references(self, entity: Lead) -> None:
        users = UserRepository(self.session)
        users.ensure_exists(entity.doctor_id)
        users.ensure_exists(entity.last_updated_by_id)
