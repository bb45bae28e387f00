# app/utils/slug.py
import re
from slugify import slugify

SLUG_MAX_LENGTH = 40

# Мягкий и твердый знаки при транслитерации отбрасываются
SLUG_REPLACEMENTS = [
    ["ь", ""],
    ["Ь", ""],
    ["ъ", ""],
    ["Ъ", ""],
]

_slug_regex = re.compile(r"^[a-z0-9]+(?:[-_][a-z0-9]+)*$")
_numeric_regex = re.compile(r"^[0-9]+$")


def make_slug(text: str) -> str:
    """Транслитерирует текст в URL-безопасный идентификатор в нижнем регистре"""
    return slugify(
        text,
        max_length=SLUG_MAX_LENGTH,
        word_boundary=False,
        replacements=SLUG_REPLACEMENTS,
    )


def is_slug(value: str) -> bool:
    return bool(_slug_regex.match(value))


def is_numeric(value: str) -> bool:
    return bool(_numeric_regex.match(value))
