"""
MongoDB Form and FormSubmission Repository Implementations.

Form fields are embedded in the form document; submissions live in their
own collection keyed by form_id.
"""

from typing import Any, Optional

from pymongo import DESCENDING

from workhub.domain.entities.form import Form, FormField, FormSubmission, SubmissionStatus
from workhub.domain.ports.repositories import FormRepository, FormSubmissionRepository
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.infrastructure.persistence.mongo_base import MongoRepository


class MongoFormRepository(MongoRepository[Form], FormRepository):
    collection_name = "forms"

    def _to_entity(self, document: dict[str, Any]) -> Form:
        return Form(
            id=document["_id"],
            name=document["name"],
            fields=[
                FormField(
                    name=f["name"],
                    type=f["type"],
                    label=f["label"],
                    required=f.get("required", False),
                    validation=dict(f.get("validation") or {}),
                    properties=dict(f.get("properties") or {}),
                )
                for f in document["fields"]
            ],
            created_at=document["created_at"],
            updated_at=document["updated_at"],
            description=document.get("description"),
            layout=dict(document.get("layout") or {}),
            active=document.get("active", True),
            created_by=document.get("created_by"),
            last_modified_by=document.get("last_modified_by"),
            version=document.get("version", 1),
        )

    def _to_document(self, form: Form) -> dict[str, Any]:
        return {
            "_id": form.id,
            "name": form.name,
            "description": form.description,
            "fields": [
                {
                    "name": f.name,
                    "type": f.type,
                    "label": f.label,
                    "required": f.required,
                    "validation": f.validation,
                    "properties": f.properties,
                }
                for f in form.fields
            ],
            "layout": form.layout,
            "active": form.active,
            "created_by": form.created_by,
            "last_modified_by": form.last_modified_by,
            "version": form.version,
            "created_at": form.created_at,
            "updated_at": form.updated_at,
        }

    async def get_by_id(self, form_id: str) -> Optional[Form]:
        return await self._find_one({"_id": form_id})

    async def exists_by_name(self, name: str) -> bool:
        return await self._exists({"name": name})

    async def find_all(self, active_only: bool, page: PageRequest) -> Page[Form]:
        return await self._find_page({"active": True} if active_only else {}, page)

    async def save(self, form: Form) -> None:
        await self._upsert(form)

    async def delete(self, form_id: str) -> bool:
        return await self._delete_by_id(form_id)


class MongoFormSubmissionRepository(
    MongoRepository[FormSubmission], FormSubmissionRepository
):
    collection_name = "form_submissions"
    default_sort = ("submitted_at", DESCENDING)

    def _to_entity(self, document: dict[str, Any]) -> FormSubmission:
        return FormSubmission(
            id=document["_id"],
            form_id=document["form_id"],
            user_id=document["user_id"],
            data=dict(document.get("data") or {}),
            status=SubmissionStatus(document["status"]),
            submitted_at=document["submitted_at"],
            processed_at=document.get("processed_at"),
        )

    def _to_document(self, submission: FormSubmission) -> dict[str, Any]:
        return {
            "_id": submission.id,
            "form_id": submission.form_id,
            "user_id": submission.user_id,
            "data": submission.data,
            "status": submission.status.value,
            "submitted_at": submission.submitted_at,
            "processed_at": submission.processed_at,
        }

    async def get_by_id(self, submission_id: str) -> Optional[FormSubmission]:
        return await self._find_one({"_id": submission_id})

    async def find_by_form(
        self, form_id: str, page: PageRequest
    ) -> Page[FormSubmission]:
        return await self._find_page({"form_id": form_id}, page)

    async def find_by_user(
        self, user_id: str, page: PageRequest
    ) -> Page[FormSubmission]:
        return await self._find_page({"user_id": user_id}, page)

    async def save(self, submission: FormSubmission) -> None:
        await self._upsert(submission)

    async def delete_by_form(self, form_id: str) -> int:
        return await self._delete_many({"form_id": form_id})
