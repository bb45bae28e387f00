# app/database/init_db.py
import logging
from datetime import date, datetime, timezone

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, select

from auth.access import AccessLevel
# Импорт всех моделей для создания таблиц
from models import Category, Client, Department, Lead, Pet, Role, Service, User, Visit
from repositories import (
    CategoryRepository,
    ClientRepository,
    DepartmentRepository,
    LeadRepository,
    PetRepository,
    RoleRepository,
    ServiceRepository,
    UserRepository,
    VisitRepository,
)

logger = logging.getLogger(__name__)


def init_db(engine: Engine, drop_all: bool = False, master_data: bool = False) -> None:
    """
    Инициализация схемы базы данных.

    Args:
        engine: Движок SQLAlchemy
        drop_all: Если True, удаляет все таблицы перед созданием
        master_data: Если True, загружает справочники и демо-данные в пустую БД
    """
    try:
        if drop_all:
            logger.warning("Удаление всех таблиц...")
            SQLModel.metadata.drop_all(engine)

        logger.info("Создание таблиц...")
        SQLModel.metadata.create_all(engine)

        if master_data:
            with Session(engine) as session:
                # Проверяем, нужно ли загружать данные
                if session.exec(select(Role)).first() is None:
                    logger.info("Загрузка начальных данных...")
                    load_master_data(session)

        logger.info("База данных успешно инициализирована")

    except Exception as e:
        logger.error(f"Ошибка при инициализации БД: {e}")
        raise


def load_master_data(session: Session) -> None:
    """
    Загрузка справочников и демонстрационных записей.

    Записи создаются через репозитории, поэтому проходят те же проверки
    внешних ключей, что и запросы API.
    """
    roles = RoleRepository(session)
    for level in (AccessLevel.STAFF, AccessLevel.ADMINISTRATOR, AccessLevel.OWNER, AccessLevel.SUPERUSER):
        roles.create(Role(name=level.label))

    categories = CategoryRepository(session)
    for name in ("Консультация", "Процедуры", "Кардиология", "Инструментальная диагностика"):
        categories.create(Category(name=name))

    services = ServiceRepository(session)
    for name, price, category_id in (
        ("Консультация", 1000, 1),
        ("Прием врача терапевта", 3000, 1),
        ("Стрижка когтей", 800, 2),
        ("Глюкометрия", 400, 2),
        ("Вакцинация", 2500, 2),
        ("Залог за прибор для телеметрии", 30000, 3),
        ("ЭхоКГ скрининг", 3500, 4),
        ("Холтеровское мониторирование", 9500, 4),
    ):
        services.create(Service(name=name, price=price, category_id=category_id))

    departments = DepartmentRepository(session)
    departments.create(Department(name="Терапия"), service_ids=[1, 2, 3, 4, 5])
    departments.create(Department(name="Кардиология"), service_ids=[1, 6, 7, 8])

    users = UserRepository(session)
    owner = users.create(User(username="Test1", password="Password1!", role_id=AccessLevel.SUPERUSER.value))
    users.update(
        User(
            email="test1@example.com",
            phone="+71111111111",
            active=True,
            surname="Фамилия",
            name="Имя",
            patronymic="Отчество",
            sex="Женский",
            birth_date=date(1995, 1, 1),
            profession="Терапевт",
            info="Информация",
            role_id=AccessLevel.SUPERUSER.value,
        ),
        owner.id,
        owner=True,
        department_ids=[1],
        service_ids=[1, 3, 4, 5],
    )

    client = ClientRepository(session).create(Client(
        surname="Фамилия",
        name="Имя",
        patronymic="Отчество",
        sex="Мужской",
        birth_date=date(1991, 1, 1),
        phone="+78888888888",
        email="mail@mail.su",
        info="Информация",
    ))
    pet = PetRepository(session).create(Pet(
        name="Китти",
        type="Кошка",
        breed="Дворняга",
        colour="Серый полосатый",
        sex="Самка",
        client_id=client.id,
    ))
    VisitRepository(session).create(Visit(
        date_time=datetime(2024, 1, 1, tzinfo=timezone.utc),
        info="Вакцинация",
        client_id=client.id,
        pet_id=pet.id,
        doctor_id=owner.id,
        last_updated_by_id=owner.id,
        service_id=5,
    ))
    LeadRepository(session).create(Lead(
        name="Александр",
        phone="+79992225566",
        email="alex@example.com",
        comment="Комментарий клиента",
        type="callback",
        doctor_id=owner.id,
    ))
    logger.info("Начальные данные загружены")
