"""Update Profile Command. Creates the profile when the user has none yet."""

from dataclasses import dataclass
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.profile import Profile
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import ProfileRepository, UserRepository
from workhub.domain.value_objects.address import Address


@dataclass(frozen=True)
class UpdateProfileCommand(Command[Profile]):
    user_id: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    phone_number: Optional[str] = None
    job_title: Optional[str] = None
    department: Optional[str] = None
    preferred_language: Optional[str] = None
    timezone: Optional[str] = None
    address: Optional[Address] = None
    social_links: Optional[dict] = None


class UpdateProfileHandler(CommandHandler[Profile]):
    def __init__(
        self, user_repository: UserRepository, profile_repository: ProfileRepository
    ):
        self._user_repository = user_repository
        self._profile_repository = profile_repository

    async def execute(self, command: UpdateProfileCommand) -> Profile:
        if not await self._user_repository.exists_by_id(command.user_id):
            raise EntityNotFoundError.for_id("User", command.user_id)

        profile = await self._profile_repository.get_by_user_id(command.user_id)
        if profile is None:
            profile = Profile.empty_for(command.user_id)

        for name in (
            "bio",
            "avatar_url",
            "phone_number",
            "job_title",
            "department",
            "preferred_language",
            "timezone",
            "address",
        ):
            value = getattr(command, name)
            if value is not None:
                setattr(profile, name, value)
        if command.social_links is not None:
            profile.social_links = dict(command.social_links)
        profile.touch()

        await self._profile_repository.save(profile)
        return profile
