import os
import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

# Настройки тестового окружения задаются до импорта приложения
os.environ.update({
    "VET_CLINIC_ENV": "test",
    "DB_DIALECT": "sqlite",
    "DB_HOST": ":memory:",
    "REDIS_ENABLED": "false",
    "MASTER_GENERATOR": "false",
    "STATIC_ENABLED": "false",
    "SECURITY_ENABLED": "true",
    "PASSWORD_HASH_COST": "4",
})

# Добавляем путь к app в PYTHONPATH
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from main import app
from database.database import get_session
from database.init_db import load_master_data
from models.user import User
from repositories import UserRepository

PASSWORD = "Password1!"
SUPERUSER = "Test1"

# Сотрудники по ролям: имя пользователя -> id роли
STAFF_USERS = {
    "staff": 1,
    "admin": 2,
    "owner": 3,
}


@pytest.fixture(name="session")
def session_fixture():
    """Создаем тестовую БД в памяти"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        _create_test_data(session)
        yield session


def _create_test_data(session: Session):
    """
    Справочники и демо-записи как при запуске приложения, плюс по одному
    сотруднику на каждую роль: staff (id 2), admin (id 3), owner (id 4).
    Суперпользователь Test1 имеет id 1.
    """
    load_master_data(session)

    users = UserRepository(session)
    for username, role_id in STAFF_USERS.items():
        users.create(User(username=username, password=PASSWORD, role_id=role_id))


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Создаем тестовый клиент"""

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()


@pytest.fixture(name="login")
def login_fixture(client: TestClient):
    """Вход через /v1/login; cookie сессии сохраняется в клиенте"""

    def _login(login: str, password: str = PASSWORD):
        response = client.post("/v1/login", json={"login": login, "password": password})
        assert response.status_code == 200, response.text
        return response.json()

    return _login
