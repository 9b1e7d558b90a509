"""Form, submission and workflow DTOs."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from workhub.domain.entities.form import Form, FormField, FormSubmission
from workhub.domain.entities.workflow import Workflow, WorkflowStep


class FormFieldDTO(BaseModel):
    name: str
    type: str
    label: str
    required: bool = False
    validation: dict[str, Any] = {}
    properties: dict[str, Any] = {}

    @classmethod
    def from_value(cls, f: FormField) -> "FormFieldDTO":
        return cls(
            name=f.name,
            type=f.type,
            label=f.label,
            required=f.required,
            validation=dict(f.validation),
            properties=dict(f.properties),
        )

    def to_value(self) -> FormField:
        return FormField(**self.model_dump())


class FormDTO(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    fields: list[FormFieldDTO]
    layout: dict[str, Any]
    active: bool
    created_by: Optional[str] = None
    last_modified_by: Optional[str] = None
    version: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, form: Form) -> "FormDTO":
        return cls(
            id=form.id,
            name=form.name,
            description=form.description,
            fields=[FormFieldDTO.from_value(f) for f in form.fields],
            layout=dict(form.layout),
            active=form.active,
            created_by=form.created_by,
            last_modified_by=form.last_modified_by,
            version=form.version,
            created_at=form.created_at,
            updated_at=form.updated_at,
        )


class FormSubmissionDTO(BaseModel):
    id: str
    form_id: str
    user_id: str
    data: dict[str, Any]
    status: str
    submitted_at: datetime
    processed_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, submission: FormSubmission) -> "FormSubmissionDTO":
        return cls(
            id=submission.id,
            form_id=submission.form_id,
            user_id=submission.user_id,
            data=dict(submission.data),
            status=submission.status.value,
            submitted_at=submission.submitted_at,
            processed_at=submission.processed_at,
        )


class WorkflowStepDTO(BaseModel):
    order: int
    type: str
    config: dict[str, Any] = {}
    conditions: dict[str, Any] = {}

    @classmethod
    def from_value(cls, step: WorkflowStep) -> "WorkflowStepDTO":
        return cls(
            order=step.order,
            type=step.type,
            config=dict(step.config),
            conditions=dict(step.conditions),
        )

    def to_value(self) -> WorkflowStep:
        return WorkflowStep(**self.model_dump())


class WorkflowDTO(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    form_id: str
    steps: list[WorkflowStepDTO]
    active: bool
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, workflow: Workflow) -> "WorkflowDTO":
        return cls(
            id=workflow.id,
            name=workflow.name,
            description=workflow.description,
            form_id=workflow.form_id,
            steps=[WorkflowStepDTO.from_value(s) for s in workflow.steps],
            active=workflow.active,
            created_by=workflow.created_by,
            created_at=workflow.created_at,
            updated_at=workflow.updated_at,
        )
