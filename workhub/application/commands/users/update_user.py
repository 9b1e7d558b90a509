"""Update User Command (partial update)."""

from dataclasses import dataclass
from logging import getLogger
from typing import Any, Optional

from workhub.application.commands.users.create_user import parse_email
from workhub.application.common.actor import Actor, SYSTEM
from workhub.application.common.audit import AuditTrail
from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.user import Role, User
from workhub.domain.exceptions import (
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
)
from workhub.domain.ports.repositories import OrganizationRepository, UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class UpdateUserCommand(Command[User]):
    user_id: str
    username: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    roles: Optional[tuple[str, ...]] = None
    organization_id: Optional[str] = None
    actor: Actor = SYSTEM


class UpdateUserHandler(CommandHandler[User]):
    def __init__(
        self,
        user_repository: UserRepository,
        organization_repository: OrganizationRepository,
        audit_trail: AuditTrail,
    ):
        self._user_repository = user_repository
        self._organization_repository = organization_repository
        self._audit_trail = audit_trail

    async def execute(self, command: UpdateUserCommand) -> User:
        user = await self._user_repository.get_by_id(command.user_id)
        if not user:
            raise EntityNotFoundError.for_id("User", command.user_id)

        changes: dict[str, Any] = {}

        # Uniqueness is re-checked only for fields that actually change
        if command.email is not None:
            email = parse_email(command.email)
            if email != user.email:
                if await self._user_repository.exists_by_email(email):
                    raise EntityAlreadyExistsError(f"Email already in use: {email.value}")
                user.email = email
                changes["email"] = email.value

        if command.username is not None and command.username != user.username:
            if await self._user_repository.exists_by_username(command.username):
                raise EntityAlreadyExistsError(
                    f"Username already taken: {command.username}"
                )
            user.username = command.username
            changes["username"] = command.username

        if (
            command.organization_id is not None
            and command.organization_id != user.organization_id
        ):
            if not await self._organization_repository.exists_by_id(
                command.organization_id
            ):
                raise EntityNotFoundError.for_id("Organization", command.organization_id)
            user.organization_id = command.organization_id
            changes["organization_id"] = command.organization_id

        if command.first_name is not None:
            user.first_name = command.first_name
            changes["first_name"] = command.first_name
        if command.last_name is not None:
            user.last_name = command.last_name
            changes["last_name"] = command.last_name
        if command.roles is not None:
            valid_roles = {role.value for role in Role}
            unknown = [role for role in command.roles if role not in valid_roles]
            if unknown or not command.roles:
                raise DomainValidationError(f"Invalid roles: {list(command.roles)}")
            user.roles = list(dict.fromkeys(command.roles))
            changes["roles"] = user.roles

        user.touch()
        await self._user_repository.save(user)
        await self._audit_trail.record(
            "USER_UPDATED", "User", user.id, actor=command.actor, changes=changes
        )
        logger.info("Updated user %s: %s", user.id, sorted(changes))
        return user
