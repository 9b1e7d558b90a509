"""
Form Entities - Form definitions and the submissions made against them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import uuid4


@dataclass(frozen=True)
class FormField:
    name: str
    type: str
    label: str
    required: bool = False
    validation: dict[str, Any] = field(default_factory=dict)
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass
class Form:
    id: str
    name: str
    fields: list[FormField]
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    layout: dict[str, Any] = field(default_factory=dict)
    active: bool = True
    created_by: Optional[str] = None
    last_modified_by: Optional[str] = None
    version: int = 1

    def __post_init__(self):
        if not self.fields:
            raise ValueError("Form must contain at least one field")

    @classmethod
    def create(
        cls,
        name: str,
        fields: list[FormField],
        description: Optional[str] = None,
        layout: Optional[dict[str, Any]] = None,
        created_by: Optional[str] = None,
    ) -> Form:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            name=name,
            fields=list(fields),
            created_at=now,
            updated_at=now,
            description=description,
            layout=dict(layout or {}),
            created_by=created_by,
            last_modified_by=created_by,
        )

    @property
    def required_field_names(self) -> list[str]:
        return [f.name for f in self.fields if f.required]

    def mark_revised(self, modified_by: Optional[str]) -> None:
        self.version += 1
        self.last_modified_by = modified_by
        self.updated_at = datetime.now(timezone.utc)

    def set_active(self, active: bool) -> None:
        self.active = active
        self.updated_at = datetime.now(timezone.utc)


class SubmissionStatus(str, Enum):
    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    REJECTED = "REJECTED"
    ERROR = "ERROR"


TERMINAL_SUBMISSION_STATUSES = (
    SubmissionStatus.COMPLETED,
    SubmissionStatus.REJECTED,
    SubmissionStatus.ERROR,
)


@dataclass
class FormSubmission:
    id: str
    form_id: str
    user_id: str
    data: dict[str, Any]
    status: SubmissionStatus
    submitted_at: datetime
    processed_at: Optional[datetime] = None

    @classmethod
    def submit(cls, form_id: str, user_id: str, data: dict[str, Any]) -> FormSubmission:
        return cls(
            id=str(uuid4()),
            form_id=form_id,
            user_id=user_id,
            data=dict(data),
            status=SubmissionStatus.SUBMITTED,
            submitted_at=datetime.now(timezone.utc),
        )

    def change_status(self, status: SubmissionStatus) -> None:
        self.status = status
        if status in TERMINAL_SUBMISSION_STATUSES:
            self.processed_at = datetime.now(timezone.utc)
