import pytest
from fastapi.testclient import TestClient
from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

import database.database
from database.init_db import init_db
from main import app
from repositories import LeadRepository, RoleRepository, UserRepository, VisitRepository


@pytest.fixture(name="engine")
def engine_fixture():
    """Пустая БД в памяти без схемы"""
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )


def test_init_db_loads_master_data_once(engine):
    init_db(engine, master_data=True)
    init_db(engine, master_data=True)

    with Session(engine) as session:
        assert [role.name for role in RoleRepository(session).get_all()] == [
            "Staff", "Admin", "Owner", "Superuser",
        ]
        owner = UserRepository(session).get(1)
        assert owner.username == "Test1"
        assert owner.role.name == "Superuser"
        assert VisitRepository(session).get(1).date_time.year == 2024
        assert LeadRepository(session).get(1).status == "open"


def test_init_db_drop_all(engine):
    init_db(engine, master_data=True)
    init_db(engine, drop_all=True)

    with Session(engine) as session:
        assert RoleRepository(session).get_all() == []


def test_lifespan_creates_schema(engine, monkeypatch):
    monkeypatch.setattr(database.database, "engine", engine)

    with TestClient(app) as client:
        assert client.get("/v1/health").status_code == 200

    assert inspect(engine).has_table("users")
    assert inspect(engine).has_table("departments_services")
