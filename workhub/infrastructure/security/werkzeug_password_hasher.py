"""Password hashing backed by werkzeug.security (salted scrypt/pbkdf2)."""

from werkzeug.security import check_password_hash, generate_password_hash

from workhub.domain.ports.password_hasher import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str = "scrypt"):
        self._method = method

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method)

    def verify(self, password_hash: str, password: str) -> bool:
        if not password_hash:
            return False
        return check_password_hash(password_hash, password)
