# app/auth/access.py
from enum import IntEnum


class AccessLevel(IntEnum):
    """
    Уровни доступа сотрудников в порядке возрастания доверия.

    Уровень определяется по имени роли сотрудника; неизвестная роль или
    отсутствие сессии дают UNAUTHORIZED.
    """
    UNAUTHORIZED = 0
    STAFF = 1
    ADMINISTRATOR = 2
    OWNER = 3
    SUPERUSER = 4

    @property
    def label(self) -> str:
        """Имя роли в БД, соответствующее уровню"""
        return _LABELS[self]

    @classmethod
    def from_role_name(cls, name: str) -> "AccessLevel":
        return _BY_LABEL.get(name, cls.UNAUTHORIZED)

    def access_allowed(self, level: "AccessLevel") -> bool:
        """Разрешен ли доступ с уровнем level к ресурсу, требующему self"""
        return level >= self


_LABELS = {
    AccessLevel.UNAUTHORIZED: "Unauthorized",
    AccessLevel.STAFF: "Staff",
    AccessLevel.ADMINISTRATOR: "Admin",
    AccessLevel.OWNER: "Owner",
    AccessLevel.SUPERUSER: "Superuser",
}
_BY_LABEL = {label: level for level, label in _LABELS.items() if level != AccessLevel.UNAUTHORIZED}
