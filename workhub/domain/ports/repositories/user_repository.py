"""
User Repository Port - Interface for user persistence.
Implementation: workhub/infrastructure/persistence/mongo_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from workhub.domain.entities.user import User
from workhub.domain.value_objects.email_address import EmailAddress
from workhub.domain.value_objects.page import Page, PageRequest


class UserRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset(
        {
            "id",
            "username",
            "email",
            "first_name",
            "last_name",
            "last_login",
            "created_at",
            "updated_at",
        }
    )

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    async def get_by_email(self, email: EmailAddress) -> Optional[User]: ...

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    async def exists_by_id(self, user_id: str) -> bool: ...

    @abstractmethod
    async def exists_by_email(self, email: EmailAddress) -> bool: ...

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool: ...

    @abstractmethod
    async def find_all(self, page: PageRequest) -> Page[User]: ...

    @abstractmethod
    async def find_by_role(self, role: str, page: PageRequest) -> Page[User]: ...

    @abstractmethod
    async def find_by_organization(
        self, organization_id: str, page: PageRequest
    ) -> Page[User]: ...

    @abstractmethod
    async def search(self, term: str, page: PageRequest) -> Page[User]:
        """Case-insensitive match on username, email, first_name or last_name."""
        ...

    @abstractmethod
    async def save(self, user: User) -> None: ...

    @abstractmethod
    async def delete(self, user_id: str) -> bool: ...
