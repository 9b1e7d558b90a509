"""
MongoDB User Repository Implementation.

Mapping:
- users document: _id, username, email, password_hash, first_name,
  last_name, roles, organization_id, active, last_login, created_at,
  updated_at
- email is stored as its normalised (lower-case) string
"""

from typing import Any, Optional

from pymongo import ASCENDING

from workhub.domain.entities.user import User
from workhub.domain.ports.repositories import UserRepository
from workhub.domain.value_objects.email_address import EmailAddress
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.infrastructure.persistence.mongo_base import (
    MongoRepository,
    contains_ignore_case,
)


class MongoUserRepository(MongoRepository[User], UserRepository):
    collection_name = "users"
    default_sort = ("username", ASCENDING)

    def _to_entity(self, document: dict[str, Any]) -> User:
        return User(
            id=document["_id"],
            username=document["username"],
            email=EmailAddress(document["email"]),
            password_hash=document["password_hash"],
            created_at=document["created_at"],
            updated_at=document["updated_at"],
            roles=list(document.get("roles") or ["USER"]),
            first_name=document.get("first_name"),
            last_name=document.get("last_name"),
            organization_id=document.get("organization_id"),
            active=document.get("active", True),
            last_login=document.get("last_login"),
        )

    def _to_document(self, user: User) -> dict[str, Any]:
        return {
            "_id": user.id,
            "username": user.username,
            "email": user.email.value,
            "password_hash": user.password_hash,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "roles": list(user.roles),
            "organization_id": user.organization_id,
            "active": user.active,
            "last_login": user.last_login,
            "created_at": user.created_at,
            "updated_at": user.updated_at,
        }

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return await self._find_one({"_id": user_id})

    async def get_by_email(self, email: EmailAddress) -> Optional[User]:
        return await self._find_one({"email": email.value})

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self._find_one({"username": username})

    async def exists_by_id(self, user_id: str) -> bool:
        return await self._exists({"_id": user_id})

    async def exists_by_email(self, email: EmailAddress) -> bool:
        return await self._exists({"email": email.value})

    async def exists_by_username(self, username: str) -> bool:
        return await self._exists({"username": username})

    async def find_all(self, page: PageRequest) -> Page[User]:
        return await self._find_page({}, page)

    async def find_by_role(self, role: str, page: PageRequest) -> Page[User]:
        return await self._find_page({"roles": role}, page)

    async def find_by_organization(
        self, organization_id: str, page: PageRequest
    ) -> Page[User]:
        return await self._find_page({"organization_id": organization_id}, page)

    async def search(self, term: str, page: PageRequest) -> Page[User]:
        pattern = contains_ignore_case(term)
        return await self._find_page(
            {
                "$or": [
                    {"username": pattern},
                    {"email": pattern},
                    {"first_name": pattern},
                    {"last_name": pattern},
                ]
            },
            page,
        )

    async def save(self, user: User) -> None:
        await self._upsert(user)

    async def delete(self, user_id: str) -> bool:
        return await self._delete_by_id(user_id)
