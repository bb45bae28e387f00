# app/auth/hash_password.py
import bcrypt
from database.config import get_settings


class HashPassword:
    """Хеширование и проверка паролей через bcrypt"""

    def __init__(self, rounds: int = None):
        self.rounds = rounds or get_settings().PASSWORD_HASH_COST

    def create_hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_hash(self, plain_password: str, hashed_password: str) -> bool:
        if not hashed_password:
            return False
        try:
            return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
        except ValueError:
            # Строка в БД не является bcrypt-хешем
            return False
