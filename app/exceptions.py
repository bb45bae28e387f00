# app/exceptions.py
"""Ошибки предметной области, возвращаемые клиенту с кодом 400"""


class VetClinicError(Exception):
    """Базовая ошибка приложения"""
    message = "internal error"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class InputError(VetClinicError):
    """Идентификатор в запросе не является числом или slug"""
    message = "failed to fetch data"


class NotFoundError(VetClinicError):
    """Запись (или запись по внешнему ключу) не найдена"""
    message = "record not found"


class IntegrityViolationError(VetClinicError):
    """База данных отклонила запись, например из-за уникального ключа"""
    message = "failed to save data"


class PasswordMismatchError(VetClinicError):
    """Пароль не совпадает с сохраненным хешем"""
    message = "hashedPassword is not the hash of the given password"
