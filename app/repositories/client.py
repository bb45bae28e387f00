# app/repositories/client.py
from models.client import Client
from repositories.base import BaseRepository

CLIENT_FIELDS = ("surname", "name", "patronymic", "sex", "birth_date", "phone", "email", "info")


class ClientRepository(BaseRepository[Client]):
    model = Client
    create_fields = CLIENT_FIELDS
    update_fields = CLIENT_FIELDS
