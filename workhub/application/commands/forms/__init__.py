"""Form and submission commands."""

from .form_commands import (
    CreateFormCommand,
    CreateFormHandler,
    DeleteFormCommand,
    DeleteFormHandler,
    SetFormActiveCommand,
    SetFormActiveHandler,
    UpdateFormCommand,
    UpdateFormHandler,
)
from .submission_commands import (
    SubmitFormCommand,
    SubmitFormHandler,
    UpdateSubmissionStatusCommand,
    UpdateSubmissionStatusHandler,
)

__all__ = [
    "CreateFormCommand",
    "CreateFormHandler",
    "DeleteFormCommand",
    "DeleteFormHandler",
    "SetFormActiveCommand",
    "SetFormActiveHandler",
    "UpdateFormCommand",
    "UpdateFormHandler",
    "SubmitFormCommand",
    "SubmitFormHandler",
    "UpdateSubmissionStatusCommand",
    "UpdateSubmissionStatusHandler",
]
