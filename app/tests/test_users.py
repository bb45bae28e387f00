import pytest
from sqlmodel import Session

from auth.hash_password import HashPassword
from exceptions import InputError, NotFoundError, PasswordMismatchError
from models.user import User
from repositories import UserRepository
from repositories.user import make_user_slug
from services import DepartmentService, UserService

from conftest import PASSWORD, SUPERUSER


def _owner_update(**fields) -> User:
    data = dict(email="user@example.com", phone="+79991234567", role_id=1)
    data.update(fields)
    return User(**data)


def test_create_user(session: Session):
    users = UserRepository(session)
    user = users.create(User(username="newbie", password=PASSWORD, role_id=1, active=False))

    assert user.active is True
    assert user.slug == str(user.id)
    assert user.password != PASSWORD
    assert HashPassword().verify_hash(PASSWORD, user.password)
    assert user.role.name == "Staff"


def test_create_user_requires_role(session: Session):
    with pytest.raises(NotFoundError):
        UserRepository(session).create(User(username="newbie", password=PASSWORD, role_id=999))


def test_user_slug_from_full_name():
    user = User(username="petrov", surname="Петров", name="Иван", patronymic="Сергеевич")
    assert make_user_slug(user, 7) == "petrov-ivan-sergeevich"
    assert make_user_slug(User(username="anon"), 7) == "7"


def test_owner_update_reconciles_associations(session: Session):
    users = UserRepository(session)
    user = users.update(
        _owner_update(surname="Петров", name="Иван", profession="Хирург", role_id=2),
        2,
        owner=True,
        department_ids=[2, 999, 2],
        service_ids=[6, 7, 555],
    )

    assert [department.id for department in user.departments] == [2]
    assert sorted(service.id for service in user.services) == [6, 7]
    assert user.role.name == "Admin"
    assert user.profession == "Хирург"
    assert user.slug == "petrov-ivan"

    user = users.update(_owner_update(), 2, owner=True, department_ids=[], service_ids=[])
    assert user.departments == []
    assert user.services == []
    assert user.slug == "2"


def test_owner_update_requires_role(session: Session):
    with pytest.raises(NotFoundError):
        UserRepository(session).update(_owner_update(role_id=999), 2, owner=True)


def test_self_update_keeps_owner_fields(session: Session):
    users = UserRepository(session)
    user = users.update(
        _owner_update(surname="Петров", profession="Хирург", role_id=4, active=False),
        2,
        owner=False,
        department_ids=[1],
    )

    assert user.surname == "Петров"
    assert user.profession == ""
    assert user.role.name == "Staff"
    assert user.active is True
    assert user.departments == []


def test_update_missing_user(session: Session):
    with pytest.raises(NotFoundError):
        UserRepository(session).update(_owner_update(), 999)


@pytest.mark.parametrize("login", [SUPERUSER, "test1@example.com", "+71111111111"])
def test_login_by_username_email_phone(session: Session, login):
    user = UserRepository(session).login(login, PASSWORD)
    assert user.id == 1


def test_login_failures(session: Session):
    users = UserRepository(session)
    with pytest.raises(NotFoundError):
        users.login("nobody", PASSWORD)
    with pytest.raises(PasswordMismatchError):
        users.login(SUPERUSER, "Wrong1pass!")


def test_login_deleted_user(session: Session):
    users = UserRepository(session)
    users.delete(2)
    with pytest.raises(NotFoundError):
        users.login("staff", PASSWORD)


def test_update_password(session: Session):
    users = UserRepository(session)
    with pytest.raises(PasswordMismatchError):
        users.update_password(2, "Wrong1pass!", "Password2!")

    users.update_password(2, PASSWORD, "Password2!")
    assert users.login("staff", "Password2!").id == 2
    with pytest.raises(PasswordMismatchError):
        users.login("staff", PASSWORD)


def test_user_service_get_by_id_or_slug(session: Session):
    service = UserService(session)
    user = service.get("1")
    assert service.get(user.slug).id == 1
    assert service.get("2").slug == "2"

    with pytest.raises(InputError) as exc_info:
        service.get("Not A Slug")
    assert exc_info.value.message == "failed to fetch data"
    with pytest.raises(NotFoundError):
        service.get("unknown-slug")


def test_department_service_get_by_slug(session: Session):
    service = DepartmentService(session)
    department = service.get("1")
    assert service.get(department.slug).name == "Терапия"
    with pytest.raises(InputError):
        service.get("Терапия")


def test_service_rejects_non_numeric_id(session: Session):
    with pytest.raises(InputError):
        UserService(session).delete("abc")
    with pytest.raises(InputError):
        DepartmentService(session).update("abc", None)


def test_owner_update_replaces_services(session: Session):
    """Список услуг заменяется целиком, несуществующие id отбрасываются"""
    users = UserRepository(session)
    user = users.update(_owner_update(), 2, owner=True, service_ids=[1, 3])
    assert sorted(service.id for service in user.services) == [1, 3]

    user = users.update(_owner_update(), 2, owner=True, service_ids=[1, 99])
    assert [service.id for service in user.services] == [1]
