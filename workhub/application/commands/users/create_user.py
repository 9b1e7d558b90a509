"""
Create User Command.

Steps:
1. Email and username must both be free
2. Referenced organization (if any) must exist
3. Hash the password, create the user (active, default role USER)
4. Create an empty profile
5. Append USER_CREATED to the audit trail
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.common.actor import Actor, SYSTEM
from workhub.application.common.audit import AuditTrail
from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.profile import Profile
from workhub.domain.entities.user import User
from workhub.domain.exceptions import (
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
)
from workhub.domain.ports.password_hasher import PasswordHasher
from workhub.domain.ports.repositories import (
    OrganizationRepository,
    ProfileRepository,
    UserRepository,
)
from workhub.domain.value_objects.email_address import EmailAddress

logger = getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


def parse_email(value: str) -> EmailAddress:
    try:
        return EmailAddress(value)
    except ValueError as e:
        raise DomainValidationError(str(e)) from e


def check_password_strength(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise DomainValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )


@dataclass(frozen=True)
class CreateUserCommand(Command[User]):
    username: str
    email: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    roles: tuple[str, ...] = ()
    organization_id: Optional[str] = None
    actor: Actor = SYSTEM


class CreateUserHandler(CommandHandler[User]):
    def __init__(
        self,
        user_repository: UserRepository,
        organization_repository: OrganizationRepository,
        profile_repository: ProfileRepository,
        password_hasher: PasswordHasher,
        audit_trail: AuditTrail,
    ):
        self._user_repository = user_repository
        self._organization_repository = organization_repository
        self._profile_repository = profile_repository
        self._password_hasher = password_hasher
        self._audit_trail = audit_trail

    async def execute(self, command: CreateUserCommand) -> User:
        email = parse_email(command.email)
        check_password_strength(command.password)

        if await self._user_repository.exists_by_email(email):
            raise EntityAlreadyExistsError(f"Email already in use: {email.value}")
        if await self._user_repository.exists_by_username(command.username):
            raise EntityAlreadyExistsError(f"Username already taken: {command.username}")
        if command.organization_id and not await self._organization_repository.exists_by_id(
            command.organization_id
        ):
            raise EntityNotFoundError.for_id("Organization", command.organization_id)

        try:
            user = User.create(
                username=command.username,
                email=email,
                password_hash=self._password_hasher.hash(command.password),
                roles=list(command.roles),
                first_name=command.first_name,
                last_name=command.last_name,
                organization_id=command.organization_id,
            )
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        await self._user_repository.save(user)
        await self._profile_repository.save(Profile.empty_for(user.id))
        await self._audit_trail.record(
            "USER_CREATED",
            "User",
            user.id,
            actor=command.actor,
            changes={"username": user.username, "email": user.email.value},
        )
        logger.info("Created user %s (%s)", user.id, user.username)
        return user
