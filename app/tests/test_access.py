import pytest

from auth.access import AccessLevel
from auth.authenticate import get_access_level
from models.role import Role
from models.user import User


def test_levels_are_ordered():
    assert (
        AccessLevel.UNAUTHORIZED
        < AccessLevel.STAFF
        < AccessLevel.ADMINISTRATOR
        < AccessLevel.OWNER
        < AccessLevel.SUPERUSER
    )


@pytest.mark.parametrize("name,level", [
    ("Staff", AccessLevel.STAFF),
    ("Admin", AccessLevel.ADMINISTRATOR),
    ("Owner", AccessLevel.OWNER),
    ("Superuser", AccessLevel.SUPERUSER),
    ("Guest", AccessLevel.UNAUTHORIZED),
    ("", AccessLevel.UNAUTHORIZED),
])
def test_level_from_role_name(name, level):
    assert AccessLevel.from_role_name(name) == level


def test_label_round_trip():
    for level in (AccessLevel.STAFF, AccessLevel.ADMINISTRATOR, AccessLevel.OWNER, AccessLevel.SUPERUSER):
        assert AccessLevel.from_role_name(level.label) == level


def test_access_allowed():
    """Доступ разрешен, если уровень сотрудника не ниже требуемого"""
    assert AccessLevel.STAFF.access_allowed(AccessLevel.STAFF)
    assert AccessLevel.STAFF.access_allowed(AccessLevel.SUPERUSER)
    assert AccessLevel.OWNER.access_allowed(AccessLevel.SUPERUSER)
    assert not AccessLevel.OWNER.access_allowed(AccessLevel.ADMINISTRATOR)
    assert not AccessLevel.STAFF.access_allowed(AccessLevel.UNAUTHORIZED)
    assert AccessLevel.UNAUTHORIZED.access_allowed(AccessLevel.UNAUTHORIZED)


def test_access_level_of_user():
    assert get_access_level(None) == AccessLevel.UNAUTHORIZED
    assert get_access_level(User(username="nobody")) == AccessLevel.UNAUTHORIZED

    user = User(username="boss")
    user.role = Role(name="Owner")
    assert get_access_level(user) == AccessLevel.OWNER
