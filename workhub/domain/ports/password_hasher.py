"""
Password Hasher Port - One-way hashing of user passwords.
Implementation: workhub/infrastructure/security/werkzeug_password_hasher.py
"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    @abstractmethod
    def hash(self, password: str) -> str: ...

    @abstractmethod
    def verify(self, password_hash: str, password: str) -> bool: ...
