"""MongoDB Workflow Repository Implementation."""

from typing import Any, Optional

from workhub.domain.entities.workflow import Workflow, WorkflowStep
from workhub.domain.ports.repositories import WorkflowRepository
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.infrastructure.persistence.mongo_base import MongoRepository


class MongoWorkflowRepository(MongoRepository[Workflow], WorkflowRepository):
    collection_name = "workflows"

    def _to_entity(self, document: dict[str, Any]) -> Workflow:
        return Workflow(
            id=document["_id"],
            name=document["name"],
            form_id=document["form_id"],
            steps=[
                WorkflowStep(
                    order=s["order"],
                    type=s["type"],
                    config=dict(s.get("config") or {}),
                    conditions=dict(s.get("conditions") or {}),
                )
                for s in document["steps"]
            ],
            created_at=document["created_at"],
            updated_at=document["updated_at"],
            description=document.get("description"),
            active=document.get("active", False),
            created_by=document.get("created_by"),
        )

    def _to_document(self, workflow: Workflow) -> dict[str, Any]:
        return {
            "_id": workflow.id,
            "name": workflow.name,
            "description": workflow.description,
            "form_id": workflow.form_id,
            "steps": [
                {"order": s.order, "type": s.type, "config": s.config, "conditions": s.conditions}
                for s in workflow.steps
            ],
            "active": workflow.active,
            "created_by": workflow.created_by,
            "created_at": workflow.created_at,
            "updated_at": workflow.updated_at,
        }

    async def get_by_id(self, workflow_id: str) -> Optional[Workflow]:
        return await self._find_one({"_id": workflow_id})

    async def exists_by_name(self, name: str) -> bool:
        return await self._exists({"name": name})

    async def find_all(self, page: PageRequest) -> Page[Workflow]:
        return await self._find_page({}, page)

    async def find_by_form(self, form_id: str) -> list[Workflow]:
        return await self._find_many({"form_id": form_id})

    async def save(self, workflow: Workflow) -> None:
        await self._upsert(workflow)

    async def delete(self, workflow_id: str) -> bool:
        return await self._delete_by_id(workflow_id)
