# app/services/entities.py
from repositories import (
    CategoryRepository,
    ClientRepository,
    LeadRepository,
    PetRepository,
    RoleRepository,
    ServiceRepository,
    VisitRepository,
)
from services.base import EntityService


class RoleService(EntityService):
    repository_class = RoleRepository


class CategoryService(EntityService):
    repository_class = CategoryRepository


class ServiceService(EntityService):
    """Услуги клиники"""
    repository_class = ServiceRepository


class ClientService(EntityService):
    repository_class = ClientRepository


class PetService(EntityService):
    repository_class = PetRepository


class VisitService(EntityService):
    repository_class = VisitRepository


class LeadService(EntityService):
    repository_class = LeadRepository
