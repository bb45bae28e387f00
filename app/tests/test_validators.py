from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from schemas.client import ClientIn
from schemas.lead import LeadIn
from schemas.role import RoleIn
from schemas.user import PasswordUpdate, UserCreate, UserSignIn, UserUpdate
from schemas.visit import VisitIn
from schemas.validators import is_e164, is_password, is_ru_alpha, is_ru_printable_ascii, is_username


def test_ru_alpha():
    assert is_ru_alpha("Иван")
    assert is_ru_alpha("Ёлкин")
    assert is_ru_alpha("John")
    assert not is_ru_alpha("Иван1")
    assert not is_ru_alpha("Анна-Мария")
    assert not is_ru_alpha("")


def test_ru_printable_ascii():
    assert is_ru_printable_ascii("")
    assert is_ru_printable_ascii("Прием врача, 2 часа!")
    assert not is_ru_printable_ascii("табуляция\t")


def test_username():
    assert is_username("user.name-1")
    assert not is_username("1user")
    assert not is_username("user name")


def test_e164():
    assert is_e164("+71111111111")
    assert not is_e164("71111111111")
    assert not is_e164("+7123")


@pytest.mark.parametrize("password,valid", [
    ("Password1!", True),
    ("password1!", False),
    ("PASSWORD1!", False),
    ("Password!!", False),
    ("Password11", False),
    ("Пароль1!Aa", False),
])
def test_password_rule(password, valid):
    assert is_password(password) is valid


def test_password_length():
    with pytest.raises(ValidationError):
        UserCreate(username="user", password="Pa1!", role_id=1)
    with pytest.raises(ValidationError):
        UserCreate(username="user", password="Pa1!" + "a" * 70, role_id=1)


def test_camel_case_aliases():
    data = UserCreate.model_validate({"username": "user", "password": "Password1!", "roleId": 2})
    assert data.role_id == 2


@pytest.mark.parametrize("login", ["Test1", "test1@example.com", "+71111111111"])
def test_login_accepts_username_email_phone(login):
    assert UserSignIn(login=login, password="Password1!").login == login


def test_login_rejects_garbage():
    with pytest.raises(ValidationError) as exc_info:
        UserSignIn(login="не логин", password="Password1!")
    assert "username|email|e164" in str(exc_info.value)


def test_password_update_rules():
    PasswordUpdate(old_password="Password1!", new_password="Password2!", confirm_password="Password2!")

    with pytest.raises(ValidationError):
        PasswordUpdate(old_password="Password1!", new_password="Password1!", confirm_password="Password1!")
    with pytest.raises(ValidationError):
        PasswordUpdate(old_password="Password1!", new_password="Password2!", confirm_password="Password3!")


def test_rule_message():
    with pytest.raises(ValidationError) as exc_info:
        RoleIn(name="Role1")
    assert "failed on the 'rualpha' rule" in str(exc_info.value)


def test_optional_fields_accept_empty_string():
    client = ClientIn(phone="+78888888888", email="mail@mail.su", surname="", name="")
    assert client.surname == ""

    lead = LeadIn(email="", phone="")
    assert lead.email is None
    assert lead.to_model().email == ""


def test_user_update_requires_contacts():
    with pytest.raises(ValidationError):
        UserUpdate(email="not-an-email", phone="+71111111111")
    with pytest.raises(ValidationError):
        UserUpdate(email="user@example.com", phone="8-800")


def test_user_update_self_ignores_owner_fields():
    data = UserUpdate(
        email="user@example.com",
        phone="+71111111111",
        active=True,
        profession="Хирург",
        role_id=4,
    )
    user = data.to_model(owner=False)
    assert user.role_id is None
    assert user.profession == ""
    assert user.active is False

    user = data.to_model(owner=True)
    assert user.role_id == 4
    assert user.profession == "Хирург"
    assert user.active is True


def test_visit_time_without_zone_is_utc():
    visit = VisitIn.model_validate({"dateTime": "2024-02-01T10:00:00"})
    assert visit.date_time == datetime(2024, 2, 1, 10, 0, tzinfo=timezone.utc)

    visit = VisitIn.model_validate({"dateTime": "2024-02-01T10:00:00+03:00"})
    assert visit.date_time.utcoffset() == timedelta(hours=3)

    assert VisitIn().date_time is None
