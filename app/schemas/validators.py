# app/schemas/validators.py
"""
Правила проверки полей запросов.

Регулярные выражения допускают русские и английские буквы; правила с
префиксом Optional пропускают пустую строку.
"""
import re
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, EmailStr
from pydantic.alias_generators import to_camel

ru_alpha_regex = re.compile(r"^[а-яА-ЯёЁa-zA-Z]+$")
ru_alpha_numeric_regex = re.compile(r"^[а-яА-ЯёЁa-zA-Z0-9]+$")
ru_printable_ascii_regex = re.compile(r"^[а-яА-ЯёЁ\x20-\x7E]*$")
username_regex = re.compile(r"^[a-zA-Z][a-zA-Z0-9_.-]*$")
password_regex = re.compile(r"^[\x20-\x7E]+$")
e164_regex = re.compile(r"^\+[1-9]?[0-9]{7,14}$")
contains_lowercase_regex = re.compile(r"[a-z]")
contains_uppercase_regex = re.compile(r"[A-Z]")
contains_digit_regex = re.compile(r"\d")
contains_symbol_regex = re.compile(r"[ !\"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~]")

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 72


def is_ru_alpha(value: str) -> bool:
    return bool(ru_alpha_regex.match(value))


def is_ru_alpha_numeric(value: str) -> bool:
    return bool(ru_alpha_numeric_regex.match(value))


def is_ru_printable_ascii(value: str) -> bool:
    return bool(ru_printable_ascii_regex.match(value))


def is_username(value: str) -> bool:
    return bool(username_regex.match(value))


def is_e164(value: str) -> bool:
    return bool(e164_regex.match(value))


def is_password(value: str) -> bool:
    """Пароль: печатные ASCII, строчная и заглавная буквы, цифра и спецсимвол"""
    return bool(
        contains_lowercase_regex.search(value)
        and contains_uppercase_regex.search(value)
        and contains_digit_regex.search(value)
        and contains_symbol_regex.search(value)
        and password_regex.match(value)
    )


def _rule(check, rule: str, omitempty: bool = False):
    def validate(value: str) -> str:
        if omitempty and value == "":
            return value
        if not check(value):
            raise ValueError(f"failed on the '{rule}' rule")
        return value
    return validate


def _check_password_length(value: str) -> str:
    if not PASSWORD_MIN_LENGTH <= len(value) <= PASSWORD_MAX_LENGTH:
        raise ValueError(
            f"must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters"
        )
    return value


def _empty_to_none(value):
    if value == "":
        return None
    return value


RuAlpha = Annotated[str, AfterValidator(_rule(is_ru_alpha, "rualpha"))]
OptionalRuAlpha = Annotated[str, AfterValidator(_rule(is_ru_alpha, "rualpha", omitempty=True))]
RuAlphaNumeric = Annotated[str, AfterValidator(_rule(is_ru_alpha_numeric, "rualphanum"))]
RuPrintableASCII = Annotated[str, AfterValidator(_rule(is_ru_printable_ascii, "ruprintascii"))]
Username = Annotated[str, AfterValidator(_rule(is_username, "username"))]
Password = Annotated[
    str,
    AfterValidator(_check_password_length),
    AfterValidator(_rule(is_password, "password")),
]
Phone = Annotated[str, AfterValidator(_rule(is_e164, "e164"))]
OptionalPhone = Annotated[str, AfterValidator(_rule(is_e164, "e164", omitempty=True))]
OptionalEmail = Annotated[Optional[EmailStr], BeforeValidator(_empty_to_none)]


class EmailAddress(BaseModel):
    email: EmailStr


def check_login(value: str) -> str:
    """Логин: имя пользователя, e-mail или телефон в формате E.164"""
    if is_username(value) or is_e164(value):
        return value
    try:
        EmailAddress.model_validate({"email": value})
    except ValueError:
        raise ValueError("failed on the 'username|email|e164' rule") from None
    return value


Login = Annotated[str, AfterValidator(check_login)]


class RequestModel(BaseModel):
    """Базовая схема тела запроса: camelCase в JSON"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
