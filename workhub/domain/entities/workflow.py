"""
Workflow Entity - Ordered processing steps bound to a form.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4


@dataclass(frozen=True)
class WorkflowStep:
    order: int
    type: str
    config: dict[str, Any] = field(default_factory=dict)
    conditions: dict[str, Any] = field(default_factory=dict)


@dataclass
class Workflow:
    id: str
    name: str
    form_id: str
    steps: list[WorkflowStep]
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    active: bool = False
    created_by: Optional[str] = None

    def __post_init__(self):
        if not self.steps:
            raise ValueError("Workflow must contain at least one step")
        self.steps = sorted(self.steps, key=lambda step: step.order)

    @classmethod
    def create(
        cls,
        name: str,
        form_id: str,
        steps: list[WorkflowStep],
        description: Optional[str] = None,
        created_by: Optional[str] = None,
    ) -> Workflow:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            name=name,
            form_id=form_id,
            steps=list(steps),
            created_at=now,
            updated_at=now,
            description=description,
            created_by=created_by,
        )

    def set_active(self, active: bool) -> None:
        self.active = active
        self.touch()

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
