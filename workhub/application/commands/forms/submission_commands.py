"""
Form submission commands.

A submission needs an existing, active form and a value for every
required field. Moving a submission to a terminal status stamps
processed_at.
"""

from dataclasses import dataclass, field
from logging import getLogger
from typing import Any

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.form import FormSubmission, SubmissionStatus
from workhub.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    InvalidStateError,
)
from workhub.domain.ports.repositories import FormRepository, FormSubmissionRepository

logger = getLogger(__name__)


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True)
class SubmitFormCommand(Command[FormSubmission]):
    form_id: str
    user_id: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class UpdateSubmissionStatusCommand(Command[FormSubmission]):
    submission_id: str
    status: SubmissionStatus


class SubmitFormHandler(CommandHandler[FormSubmission]):
    def __init__(
        self,
        form_repository: FormRepository,
        form_submission_repository: FormSubmissionRepository,
    ):
        self._form_repository = form_repository
        self._form_submission_repository = form_submission_repository

    async def execute(self, command: SubmitFormCommand) -> FormSubmission:
        form = await self._form_repository.get_by_id(command.form_id)
        if not form:
            raise EntityNotFoundError.for_id("Form", command.form_id)
        if not form.active:
            raise InvalidStateError(f"Form {form.id} is not accepting submissions")

        missing = [
            name for name in form.required_field_names if _is_missing(command.data.get(name))
        ]
        if missing:
            raise DomainValidationError(f"Missing required fields: {', '.join(missing)}")

        submission = FormSubmission.submit(
            form_id=form.id, user_id=command.user_id, data=command.data
        )
        await self._form_submission_repository.save(submission)
        logger.info("Submission %s received for form %s", submission.id, form.id)
        return submission


class UpdateSubmissionStatusHandler(CommandHandler[FormSubmission]):
    def __init__(self, form_submission_repository: FormSubmissionRepository):
        self._form_submission_repository = form_submission_repository

    async def execute(self, command: UpdateSubmissionStatusCommand) -> FormSubmission:
        submission = await self._form_submission_repository.get_by_id(command.submission_id)
        if not submission:
            raise EntityNotFoundError.for_id("FormSubmission", command.submission_id)
        submission.change_status(command.status)
        await self._form_submission_repository.save(submission)
        logger.info("Submission %s status -> %s", submission.id, command.status.value)
        return submission
